"""
Shared plotting style applied before every embedlens figure.
"""

import matplotlib.pyplot as plt
import seaborn as sns

# --- Style Constants ---
STYLE_CONFIG = {
    'font.family': 'sans-serif',
    'font.sans-serif': ['Arial', 'DejaVu Sans', 'Liberation Sans', 'Bitstream Vera Sans', 'sans-serif'],
    'axes.labelsize': 14,
    'axes.titlesize': 16,
    'xtick.labelsize': 12,
    'ytick.labelsize': 12,
    'legend.fontsize': 12,
    'axes.grid': False,
    'axes.spines.top': False,
    'axes.spines.right': False,
}


def set_style(context: str = "paper", style: str = "ticks"):
    """
    Set plotting style using Seaborn.

    Parameters
    ----------
    context : str, optional
        Seaborn context (e.g. 'paper', 'notebook', 'talk', 'poster'), by default "paper".
    style : str, optional
        Seaborn style (e.g. 'white', 'whitegrid', 'ticks'), by default "ticks".
    """
    plt.rcParams.update(STYLE_CONFIG)

    sns.set_context(context, font_scale=1.2)
    sns.set_style(style, rc=STYLE_CONFIG)
