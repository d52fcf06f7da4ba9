# liquidation_poa/main_simulation.py

import argparse
import os
import random
import sys
import time

import pandas as pd

from . import config
from .config import SimulationConfig
from .core.strategy import ObfuscationStrategy
from .model import LiquidationGameModel
from .analysis import plotting
from .analysis.poa import reports_to_frame, results_to_frame, summarize_strategy

SUMMARY_METRICS = [
    'successful_liquidations', 'failed_attempts', 'missed_liquidations',
    'profit_concentration', 'gas_waste_ratio', 'coverage', 'front_runner_share', 'total_profit'
]


def run_seed(strategy: ObfuscationStrategy, run_number: int, base_seed: int | None) -> int:
    """
    Seed for one run. With a base seed, runs are reproducible and every
    (strategy, run) pair gets its own stream; otherwise a fresh seed is drawn.
    """
    if base_seed is None:
        return random.randint(0, 2**32 - 1)
    strategy_index = ObfuscationStrategy.all().index(strategy)
    return base_seed + strategy_index * config.STRATEGY_SEED_STRIDE + run_number


def run_strategy_batch(strategy: ObfuscationStrategy, sim_config: SimulationConfig,
                       base_seed: int | None = None) -> list:
    """Plays `sim_config.num_runs` independent games under one strategy."""
    sim_config.validate()
    results = []
    for run_number in range(sim_config.num_runs):
        model = LiquidationGameModel(strategy, sim_config, seed=run_seed(strategy, run_number, base_seed))
        results.append(model.run_result())
        if config.VERBOSE_LOGGING:
            print(f"  [{strategy.label}] Run {run_number + 1}/{sim_config.num_runs}: "
                  f"{results[-1].successful_liquidations} liquidated, "
                  f"{results[-1].failed_attempts} failed, {results[-1].missed_liquidations} missed")
    return results


def run_all_strategies(sim_config: SimulationConfig, strategies: list | None = None,
                       base_seed: int | None = None) -> tuple:
    """
    Runs every strategy (declaration order by default) and reduces each batch.
    Returns (list of StrategyReport, per-run results DataFrame).
    """
    sim_config.validate()
    strategies = strategies or ObfuscationStrategy.all()
    reports = []
    all_results = []
    for strategy in strategies:
        print(f"\n--- Running: {strategy.label} ({sim_config.num_runs} runs) ---")
        start = time.time()
        results = run_strategy_batch(strategy, sim_config, base_seed)
        reports.append(summarize_strategy(strategy, results, sim_config))
        all_results.extend(results)
        print(f"    Done in {time.time() - start:.2f} seconds.")
    return reports, results_to_frame(all_results)


def print_report(reports: list):
    print("=======================================================")
    print("  IPFE Price of Anarchy Simulation")
    print("  Comparing obfuscation strategies for liquidation")
    print("=======================================================\n")
    for report in reports:
        print(f"Strategy: {report.strategy}")
        print("-" * 50)
        print(f"  Successful liquidations: {report.avg_successful:.1f}")
        print(f"  Failed attempts:         {report.avg_failed:.1f}")
        print(f"  Missed (bad debt risk):  {report.avg_missed:.1f}")
        print(f"  Profit concentration:    {report.avg_concentration_pct:.1f}%")
        print(f"  Front-runner share:      {report.avg_front_runner_share_pct:.1f}%")
        print(f"  Price of Anarchy:        {report.poa:.2f}")
        print()
    print("=======================================================")
    print("  Interpretation:")
    print("  - PoA = 1.0 means fair, efficient market")
    print("  - PoA > 1.0 means value extraction by sophisticated actors")
    print("  - Lower PoA = better for protocol health")
    print("=======================================================")


def print_summary_table(results_df: pd.DataFrame, strategy_order: list):
    """Mean ± std of the per-run metrics, one column per strategy."""
    metrics_present = [m for m in SUMMARY_METRICS if m in results_df.columns]
    if results_df.empty or not metrics_present:
        print("No valid metrics found in the aggregated results for detailed analysis.")
        return
    summary_stats = results_df.groupby('strategy')[metrics_present].agg(['mean', 'std'])
    strategies_in_summary = [s for s in strategy_order if s in summary_stats.index]

    header_width = 22
    print("\n--- Aggregated Results Summary (Mean +/- Std Dev over Runs) ---")
    header_line = f"{'Metric':<25} | " + " | ".join(plotting.format_val(s, header_width) for s in strategies_in_summary)
    print(header_line)
    print("-" * len(header_line))
    for metric in metrics_present:
        values_str = " | ".join(
            plotting.format_agg(summary_stats.loc[s, (metric, 'mean')], summary_stats.loc[s, (metric, 'std')], header_width)
            for s in strategies_in_summary
        )
        print(f"{metric:<25} | {values_str}")
    print("-" * len(header_line))


def write_outputs(output_dir: str, reports: list, results_df: pd.DataFrame) -> tuple:
    os.makedirs(output_dir, exist_ok=True)
    runs_csv = os.path.join(output_dir, "run_results.csv")
    reports_csv = os.path.join(output_dir, "strategy_reports.csv")
    results_df.drop(columns=["keeper_profits"], errors="ignore").to_csv(runs_csv, index=False)
    reports_to_frame(reports).to_csv(reports_csv, index=False)
    print(f"Per-run results saved to: {os.path.abspath(runs_csv)}")
    print(f"Strategy reports saved to: {os.path.abspath(reports_csv)}")
    return runs_csv, reports_csv


def write_plots(output_dir: str, reports: list, results_df: pd.DataFrame, strategy_order: list) -> list:
    os.makedirs(output_dir, exist_ok=True)
    written = [plotting.plot_poa_comparison(reports_to_frame(reports), strategy_order, output_dir)]
    written += plotting.plot_distributions_and_boxplots(
        results_df, ['profit_concentration', 'gas_waste_ratio', 'coverage', 'front_runner_share'],
        strategy_order, output_dir)
    for extra in (plotting.plot_keeper_profit_distributions(results_df, strategy_order, output_dir),
                  plotting.plot_cdf_comparison(results_df, 'front_runner_share', strategy_order, output_dir)):
        if extra:
            written.append(extra)
    print(f"\n--- Data Visualizations Complete. Plots saved to '{output_dir}' directory. ---")
    return written


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="liquidation-poa",
        description="Monte Carlo Price of Anarchy comparison of liquidation obfuscation strategies.",
    )
    p.add_argument("--runs", type=int, default=config.SIMULATION_RUNS, help="Runs per strategy.")
    p.add_argument("--positions", type=int, default=config.NUM_POSITIONS, help="CDPs per run.")
    p.add_argument("--keepers", type=int, default=config.NUM_KEEPERS, help="Keepers per run.")
    p.add_argument("--seed", type=int, default=None, help="Base seed for reproducible batches.")
    p.add_argument(
        "--strategies", nargs="+", default=None, metavar="NAME",
        help="Subset of strategies to run, e.g. TRANSPARENT IPFE KEEPER_POOL (default: all).",
    )
    p.add_argument("--output-dir", default=None, help="Write run_results.csv and strategy_reports.csv here.")
    p.add_argument("--plots", action="store_true", help="Also write comparison figures (needs --output-dir).")
    p.add_argument("--verbose", action="store_true", help="Trace every run, bid and outcome.")
    return p


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    if args.verbose:
        config.VERBOSE_LOGGING = True

    try:
        sim_config = SimulationConfig(
            num_positions=args.positions, num_keepers=args.keepers, num_runs=args.runs
        ).validate()
        strategies = [ObfuscationStrategy.from_name(n) for n in args.strategies] if args.strategies else None
        if args.plots and not args.output_dir:
            raise ValueError("--plots requires --output-dir")
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    start_full_run_time = time.time()
    reports, results_df = run_all_strategies(sim_config, strategies, base_seed=args.seed)
    total_duration_seconds = time.time() - start_full_run_time
    print(f"\nTotal Simulation Execution Time: {total_duration_seconds:.2f} seconds "
          f"({total_duration_seconds / 60:.2f} minutes)\n")

    print_report(reports)
    strategy_order = [r.strategy for r in reports]
    print_summary_table(results_df, strategy_order)

    if args.output_dir:
        write_outputs(args.output_dir, reports, results_df)
        if args.plots:
            write_plots(args.output_dir, reports, results_df, strategy_order)
    return 0


if __name__ == "__main__":
    sys.exit(main())
