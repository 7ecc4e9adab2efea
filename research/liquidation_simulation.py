import logging
import numpy as np
import matplotlib.pyplot as plt
import pandas as pd
from dataclasses import dataclass
from typing import List, Optional
from pathlib import Path
from datetime import datetime

from pool_model.src.constants import DEFAULT_PRICE_DECIMALS, MAX_UTILIZATION
from pool_model.src.oracle import MockPriceOracle
from pool_model.src.pool import LendingPool
from pool_model.src.state.lend_token import LendToken
from pool_model.src.state.native_asset import NativeAssetRail
from pool_model.src.state.pool_config import PoolConfig

UNIT = 10**18  # one whole collateral token
PRICE_ONE = 10**DEFAULT_PRICE_DECIMALS

@dataclass
class SimulationParams:
    initial_price: float = 1.0
    price_volatility: float = 0.01
    simulation_days: int = 60
    steps_per_day: int = 24  # hourly steps
    num_borrowers: int = 20
    min_deposit: float = 1.0   # whole tokens
    max_deposit: float = 50.0
    min_leverage: float = 0.3  # share of the borrow ceiling actually taken
    max_leverage: float = 1.0
    random_seed: Optional[int] = None
    experiment_name: str = "default"
    output_root: Path = Path('research/results')

class LiquidationSimulation:
    """Runs a pool against a Brownian collateral price and sweeps unhealthy loans"""

    def __init__(self, params: SimulationParams, config: Optional[PoolConfig] = None):
        self.params = params
        self.rng = np.random.default_rng(params.random_seed)
        self.oracle = MockPriceOracle(value=int(params.initial_price * PRICE_ONE))
        self.token = LendToken(owner="pool")
        self.rail = NativeAssetRail()
        self.pool = LendingPool(
            debt_token=self.token.capability("pool"),
            price_oracle=self.oracle,
            asset_rail=self.rail,
            config=config,
        )
        self.borrowers: List[str] = []
        self.results: Optional[pd.DataFrame] = None

    def open_positions(self) -> None:
        """Each borrower deposits a random amount and borrows part of the ceiling"""
        p = self.params
        deposits = self.rng.uniform(p.min_deposit, p.max_deposit, p.num_borrowers)
        leverage = self.rng.uniform(p.min_leverage, p.max_leverage, p.num_borrowers)

        for i, (deposit, lev) in enumerate(zip(deposits, leverage)):
            user = f"borrower_{i}"
            amount = int(deposit * UNIT)
            self.pool.deposit_collateral(user, amount, value=amount)
            self.pool.borrow(user, self.pool.max_borrow(user) * int(lev * 1000) // 1000)
            self.borrowers.append(user)

    def sweep(self) -> int:
        """Liquidate as much of every unhealthy position as its debt covers.
        Returns how many liquidations actually burned debt.
        """
        config = self.pool.config
        liquidated = 0
        for user in self.borrowers:
            if not self.pool.is_liquidatable(user):
                continue
            # largest seizure whose burn does not exceed the debt
            amount = self.pool.debt_balance(user) * config.collateralization_ratio // config.borrow_precision
            seized, burned = self.pool.liquidate("liquidator", user, amount)
            if burned == 0:
                # floor rounding on a dust position: collateral moved, no debt cleared
                logging.debug(f"{user}: seized {seized} collateral dust, burned nothing")
                continue
            liquidated += 1
        return liquidated

    def simulate(self) -> pd.DataFrame:
        p = self.params
        self.open_positions()

        total_steps = p.simulation_days * p.steps_per_day
        # Brownian motion on the price, floored so the oracle stays positive
        shocks = self.rng.normal(0, p.price_volatility, total_steps)
        path = np.maximum(p.initial_price * np.cumprod(1 + shocks), 1.0 / PRICE_ONE)

        rows = []
        for step, price in enumerate(path):
            self.oracle.set_price(max(int(price * PRICE_ONE), 1))
            liquidations = self.sweep()
            state = self.pool.state
            rows.append({
                "time": step / p.steps_per_day,
                "price": float(price),
                "utilization": self.pool.utilization(),
                "interest_rate": self.pool.current_interest_rate(),
                "liquidations": liquidations,
                "total_collateral": state.total_collateral_supplied / UNIT,
                "total_debt": state.total_debt_outstanding / UNIT,
            })

        self.results = pd.DataFrame(rows)
        return self.results

    def plot_results(self) -> Path:
        if self.results is None:
            self.simulate()
        df = self.results
        output_dir = Path(self.params.output_root) / self.params.experiment_name
        output_dir.mkdir(parents=True, exist_ok=True)

        fig, (ax1, ax2, ax3) = plt.subplots(3, 1, figsize=(12, 10), sharex=True)

        ax1.plot(df["time"], df["price"], label='Collateral Price')
        ax1.axhline(y=self.params.initial_price, color='r', linestyle='--', alpha=0.3)
        ax1.set_ylabel('Price (LEND)')
        ax1.set_title('Collateral Price Over Time')
        ax1.legend()
        ax1.grid(True)

        ax2.plot(df["time"], df["total_collateral"], label='Collateral')
        ax2.plot(df["time"], df["total_debt"], label='Debt', color='orange')
        ax2.set_ylabel('Tokens')
        ax2.set_title('Pool Balances')
        ax2.legend()
        ax2.grid(True)

        ax3.step(df["time"], df["interest_rate"], label='Interest Rate', color='green')
        ax3.bar(df["time"], df["liquidations"], width=1.0 / self.params.steps_per_day,
                label='Liquidations', color='red', alpha=0.5)
        ax3.set_ylabel('Rate (%) / Count')
        ax3.set_xlabel('Time (days)')
        ax3.legend()
        ax3.grid(True)

        plt.tight_layout()

        plot_name = f"vol_{self.params.price_volatility}_borrowers_{self.params.num_borrowers}"
        if self.params.random_seed is not None:
            plot_name += f"_seed_{self.params.random_seed}"

        path = output_dir / f"{plot_name}.png"
        plt.savefig(path)
        plt.close(fig)
        return path

def rate_curve(config: Optional[PoolConfig] = None) -> pd.DataFrame:
    """Rate at every whole utilization percentage"""
    pool = LendingPool(LendToken(owner="pool").capability("pool"), MockPriceOracle(),
                       NativeAssetRail(), config=config)
    utilization = np.arange(0, MAX_UTILIZATION + 1)
    rates = [pool.calculate_interest(int(u)) for u in utilization]
    return pd.DataFrame({"utilization": utilization, "interest_rate": rates})

def plot_rate_curve(output_root: Path = Path('research/results'),
                    config: Optional[PoolConfig] = None) -> Path:
    output_dir = Path(output_root) / 'rate_curve'
    output_dir.mkdir(parents=True, exist_ok=True)
    curve = rate_curve(config)
    optimal = (config or PoolConfig()).optimal_utilization

    fig, ax = plt.subplots(figsize=(10, 6))
    ax.step(curve["utilization"], curve["interest_rate"], where='post', label='Borrow Rate')
    ax.axvline(x=optimal, color='r', linestyle='--', alpha=0.3, label='Optimal Utilization')
    ax.set_xlabel('Utilization (%)')
    ax.set_ylabel('Interest Rate (%)')
    ax.set_title('Interest Rate Curve')
    ax.legend()
    ax.grid(True, alpha=0.3)

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    path = output_dir / f"rate_curve_{timestamp}.png"
    plt.savefig(path, bbox_inches='tight', dpi=150)
    plt.close(fig)
    return path

def main():
    plot_rate_curve()

    for volatility in (0.005, 0.01, 0.02):
        params = SimulationParams(
            experiment_name="liquidation_sweep",
            price_volatility=volatility,
            random_seed=57,
        )
        sim = LiquidationSimulation(params)
        df = sim.simulate()
        sim.plot_results()
        print(f"volatility={volatility}: {int(df['liquidations'].sum())} liquidations, "
              f"final utilization {df['utilization'].iloc[-1]}%")

if __name__ == "__main__":
    main()
