"""Сводка по коэффициенту смешения для журнала и отчётов."""
from __future__ import annotations

import logging
from typing import Dict, Optional

import numpy as np

from fields import VolField
from interpolation.blended_scheme_base import BlendedSchemeBase

logger = logging.getLogger(__name__)


def blending_statistics(scheme: BlendedSchemeBase, vf: VolField) -> Dict[str, float]:
    """
    Статистика коэффициента смешения по всем граням.

    Возвращает
    ----------
    dict
        min, max, mean, доли граней только на scheme1 (bf = 1)
        и только на scheme2 (bf = 0), число граней
    """
    bf = scheme.blending_factor(vf).field
    n = bf.shape[0]
    if n == 0:
        return {"min": np.nan, "max": np.nan, "mean": np.nan,
                "scheme1_fraction": 0.0, "scheme2_fraction": 0.0, "n_faces": 0}
    return {
        "min": float(bf.min()),
        "max": float(bf.max()),
        "mean": float(bf.mean()),
        "scheme1_fraction": float(np.count_nonzero(bf == 1.0)) / n,
        "scheme2_fraction": float(np.count_nonzero(bf == 0.0)) / n,
        "n_faces": n,
    }


def log_blending_factor(scheme: BlendedSchemeBase, vf: VolField,
                        log: Optional[logging.Logger] = None) -> Dict[str, float]:
    """Записать статистику коэффициента смешения в журнал (INFO)."""
    stats = blending_statistics(scheme, vf)
    (log or logger).info(
        f"{vf.name}BlendingFactor: min={stats['min']:.4f}, max={stats['max']:.4f}, "
        f"mean={stats['mean']:.4f}, только scheme1: {stats['scheme1_fraction']:.1%}, "
        f"только scheme2: {stats['scheme2_fraction']:.1%}"
    )
    return stats
