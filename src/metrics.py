#!/usr/bin/env python3
"""
Metrics calculation utilities for solver performance analysis.

Provides functions to summarize solve latencies and node counts.
"""

from __future__ import annotations
from typing import List, Dict
import numpy as np


def calculate_percentiles(values: List[float]) -> Dict[str, float]:
    """
    Calculate P50, P95, and P99 percentiles from an array of measurements.

    Args:
        values: List of solve times (or node counts)

    Returns:
        Dictionary containing P50, P95, and P99 values

    Raises:
        ValueError: If values is empty
    """
    if not values:
        raise ValueError("Values array cannot be empty")

    arr = np.array(values, dtype=float)

    return {
        'P50': float(np.percentile(arr, 50)),
        'P95': float(np.percentile(arr, 95)),
        'P99': float(np.percentile(arr, 99)),
    }


def print_metrics(metrics: Dict[str, float], label: str = "Solve time", unit: str = "ms") -> None:
    """
    Print formatted metrics output.

    Args:
        metrics: Dictionary containing percentile metrics
        label: Heading for the block
        unit: Unit of measurement for display (default: "ms")
    """
    print(f"{label} Metrics:")
    print(f"  P50: {metrics['P50']:.2f} {unit}")
    print(f"  P95: {metrics['P95']:.2f} {unit}")
    print(f"  P99: {metrics['P99']:.2f} {unit}")
