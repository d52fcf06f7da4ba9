# liquidation_poa/analysis/plotting.py

import matplotlib
matplotlib.use("Agg")  # Figures are only ever written to disk
import matplotlib.pyplot as plt
import seaborn as sns
import pandas as pd
import os

# --- Helper functions for formatting console output ---
def format_val(val, width=15) -> str:
    """Formats a value for table printing."""
    if isinstance(val, (int, float)):
        if pd.isna(val):
            s = "N/A"
        elif isinstance(val, int):
            s = f"{val:,}"
        elif abs(val) > 1e7 or (abs(val) < 1e-3 and val != 0):
            s = f"{val:.2e}"
        else:
            s = f"{val:,.2f}"
    else:
        s = str(val)
    return f"{s:<{width}}"

def format_agg(mean_val, std_val, width) -> str:
    """Formats mean ± std dev for table printing."""
    if pd.isna(mean_val):
        return format_val("N/A", width)
    mean_str = format_val(mean_val, width=0)
    std_str = format_val(std_val, width=0) if pd.notna(std_val) else "0.00"
    combined = f"{mean_str} ± {std_str}"
    return format_val(combined, width)

# --- Plotting Functions ---

def plot_poa_comparison(reports_df: pd.DataFrame, strategy_order: list, output_dir: str = ".") -> str:
    """Bar chart of the Price of Anarchy per strategy, with the PoA = 1 reference line."""
    sns.set_theme(style="whitegrid")
    plt.figure(figsize=(12, 7))
    sns.barplot(data=reports_df, x="strategy", y="poa", order=strategy_order)
    plt.axhline(1.0, color="black", linestyle="--", linewidth=1)
    plt.title("Price of Anarchy by Obfuscation Strategy (lower is better)")
    plt.xlabel("Strategy")
    plt.ylabel("PoA (Nash Cost / Social Optimum)")
    plt.xticks(rotation=45, ha='right')
    plt.tight_layout()
    out_path = os.path.join(output_dir, "poa_by_strategy.png")
    plt.savefig(out_path)
    plt.close()
    return out_path


def plot_distributions_and_boxplots(results_df: pd.DataFrame, metrics_to_plot: list, strategy_order: list, output_dir: str = ".") -> list:
    """
    Box plots and mean bar plots (95% CI) of per-run metrics by strategy.
    Metrics that are missing or constant are skipped with a warning.
    """
    sns.set_theme(style="whitegrid")
    print(f"\n--- Generating Box Plots for Run-level Metrics (Saving to {output_dir}) ---")
    written = []

    for metric in metrics_to_plot:
        if metric not in results_df.columns:
            print(f"Warning: Metric '{metric}' not found in results_df. Skipping its plots.")
            continue
        if results_df[metric].isnull().all() or results_df[metric].nunique() <= 1:
            print(f"Warning: Metric '{metric}' has no data or no variance. Skipping its plots.")
            continue

        plt.figure(figsize=(12, 7))
        sns.boxplot(data=results_df, x="strategy", y=metric, order=strategy_order, showfliers=True)
        plt.title(f"Box Plot of {metric} by Strategy")
        plt.xlabel("Strategy")
        plt.ylabel(metric)
        plt.xticks(rotation=45, ha='right')
        plt.tight_layout()
        out_path = os.path.join(output_dir, f"{metric}_boxplot_strategy.png")
        plt.savefig(out_path)
        plt.close()
        written.append(out_path)

        plt.figure(figsize=(12, 7))
        sns.barplot(data=results_df, x="strategy", y=metric, order=strategy_order, capsize=.1, errorbar='ci')
        plt.title(f"Mean {metric} by Strategy (with 95% CI)")
        plt.xlabel("Strategy")
        plt.ylabel(f"Mean {metric}")
        plt.xticks(rotation=45, ha='right')
        plt.tight_layout()
        out_path = os.path.join(output_dir, f"{metric}_barplot_strategy.png")
        plt.savefig(out_path)
        plt.close()
        written.append(out_path)
    print("--- Run-level metric plots complete. ---")
    return written


def plot_keeper_profit_distributions(results_df: pd.DataFrame, strategy_order: list, output_dir: str = "."):
    """Box plot of individual keeper profits (one point per keeper per run)."""
    sns.set_theme(style="whitegrid")
    if "keeper_profits" not in results_df.columns:
        print("Warning: No keeper_profits column. Skipping individual keeper profit plot.")
        return None

    per_keeper = results_df[["strategy", "run", "keeper_profits"]].explode("keeper_profits")
    per_keeper = per_keeper.rename(columns={"keeper_profits": "individual_keeper_profit"}).dropna()
    if per_keeper.empty:
        print("No individual keeper profit data to plot.")
        return None
    per_keeper["individual_keeper_profit"] = per_keeper["individual_keeper_profit"].astype(float)

    plt.figure(figsize=(14, 8))
    sns.boxplot(data=per_keeper, x="strategy", y="individual_keeper_profit", order=strategy_order, showfliers=True)
    plt.title("Box Plot of Individual Keeper Profits by Strategy")
    plt.xlabel("Strategy"); plt.ylabel("Individual Keeper Profit (DAI)"); plt.xticks(rotation=45, ha='right'); plt.tight_layout()
    out_path = os.path.join(output_dir, "individual_keeper_profit_boxplot.png")
    plt.savefig(out_path); plt.close()
    return out_path


def plot_cdf_comparison(results_df: pd.DataFrame, metric: str, strategy_order: list, output_dir: str = ".", x_lim=None):
    """CDF of a per-run metric, compared across strategies."""
    if metric not in results_df.columns:
        print(f"Warning: Metric '{metric}' not found for CDF plot. Skipping.")
        return None
    if results_df[metric].isnull().all() or results_df[metric].nunique() < 2:
        print(f"Warning: Metric '{metric}' has no data or not enough unique values for CDF plot. Skipping.")
        return None
    if results_df.groupby("strategy")[metric].var(ddof=0).fillna(0).max() < 1e-12:
        print(f"Warning: Metric '{metric}' is constant within every strategy. Skipping CDF plot.")
        return None

    plt.figure(figsize=(10, 6))
    sns.ecdfplot(data=results_df, x=metric, hue="strategy", hue_order=strategy_order)
    plt.title(f"CDF of {metric} by Strategy")
    plt.xlabel(metric)
    plt.ylabel("Cumulative Probability (P(X <= x))")
    if x_lim:
        plt.xlim(x_lim)
    plt.grid(True, which="both", ls="--", alpha=0.6)
    plt.tight_layout()
    out_path = os.path.join(output_dir, f"{metric}_cdf_strategy.png")
    plt.savefig(out_path)
    plt.close()
    return out_path
