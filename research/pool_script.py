"""Walks a pool through setup, a deposit and a borrow, then prints the rate"""
import logging

from pool_model.src.oracle import MockPriceOracle
from pool_model.src.pool import LendingPool
from pool_model.src.state.lend_token import LendToken
from pool_model.src.state.native_asset import NativeAssetRail

logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')

ETH = 10**18
ETH_AMOUNT = 10 * ETH
# 10 collateral allows ~6.66 borrowed at 150%; stay well under it
BORROW_AMOUNT = 5 * ETH

def main(deployer: str = "deployer", treasury: str = "treasury") -> int:
    token = LendToken(owner=deployer)
    # the pool reads debt from token balances, so seed supply goes to a holder that never borrows
    token.mint(treasury, ETH_AMOUNT, caller=deployer)
    logging.info(f"Minted {ETH_AMOUNT} {token.symbol} to {treasury}")

    pool = LendingPool(
        debt_token=token.capability("pool"),
        price_oracle=MockPriceOracle(),
        asset_rail=NativeAssetRail(),
    )
    token.transfer_ownership(pool.address, caller=deployer)
    logging.info(f"{token.symbol} ownership transferred to {pool.address}")

    pool.deposit_collateral(deployer, ETH_AMOUNT, value=ETH_AMOUNT)
    logging.info(f"Deposited {ETH_AMOUNT} collateral to pool")

    pool.borrow(deployer, BORROW_AMOUNT)
    logging.info(f"Borrowed {BORROW_AMOUNT} from pool")

    utilization = BORROW_AMOUNT * 100 // ETH_AMOUNT
    interest = pool.calculate_interest(utilization)
    logging.info(f"Calculated interest rate for {utilization}% utilization: {interest}%")
    return interest

if __name__ == "__main__":
    main()
