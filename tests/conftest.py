"""Shared fixtures: headless matplotlib and figure cleanup."""

from __future__ import annotations

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import pytest  # noqa: E402


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")


@pytest.fixture
def bar_figure():
    fig, ax = plt.subplots(figsize=(8, 5))
    ax.bar(["a", "b", "c"], [3, 7, 5], label="count")
    ax.set_xlabel("category")
    ax.set_ylabel("value")
    ax.legend(title="Series")
    return fig


@pytest.fixture
def facet_figure():
    fig, axes = plt.subplots(1, 2, figsize=(8, 4))
    for ax, name in zip(axes, ("North", "South")):
        ax.plot([1, 2, 3], [2, 4, 3])
        ax.set_title(name)
    return fig
