"""
Plotting helpers for training runs.
"""

import numpy as np
from typing import Dict, Optional, Sequence

import matplotlib
matplotlib.use('Agg')  # Non-interactive backend
import matplotlib.pyplot as plt


def plot_training_history(history: Dict, save_path: Optional[str] = None):
    """Plot loss, accuracy and learning rate per step from an SGD history dict."""
    steps = np.arange(len(history['loss_history']))

    fig, axes = plt.subplots(1, 3, figsize=(15, 4))

    axes[0].plot(steps, history['loss_history'], 'b-', linewidth=2)
    axes[0].set_yscale('log')
    axes[0].set_xlabel('Step')
    axes[0].set_ylabel('Total loss')
    axes[0].set_title('Loss')

    axes[1].plot(steps, 100.0 * np.asarray(history['accuracy_history']), 'g-', linewidth=2)
    axes[1].set_xlabel('Step')
    axes[1].set_ylabel('Accuracy (%)')
    axes[1].set_ylim(0, 100)
    axes[1].set_title('Accuracy')

    axes[2].plot(steps, history['learning_rates'], 'r-', linewidth=2)
    axes[2].set_xlabel('Step')
    axes[2].set_ylabel('Learning rate')
    axes[2].set_title('Learning rate decay')

    for ax in axes:
        ax.grid(True, alpha=0.3)

    plt.tight_layout()

    if save_path:
        plt.savefig(save_path, dpi=150, bbox_inches='tight')
        print(f"\nFigure saved to: {save_path}")

    plt.close(fig)


def plot_fit(xs: Sequence[float], ys_true: Sequence[float], ys_pred: Sequence[float],
             save_path: Optional[str] = None, title: str = 'Model fit'):
    """Plot target values against model predictions over one input axis."""
    fig, ax = plt.subplots(figsize=(7, 5))
    ax.plot(xs, ys_true, 'k-', linewidth=2, label='Target')
    ax.scatter(xs, ys_pred, c='red', s=20, label='Model', zorder=5)
    ax.set_xlabel('x')
    ax.set_ylabel('y')
    ax.set_title(title)
    ax.legend()
    ax.grid(True, alpha=0.3)

    plt.tight_layout()

    if save_path:
        plt.savefig(save_path, dpi=150, bbox_inches='tight')
        print(f"\nFigure saved to: {save_path}")

    plt.close(fig)
