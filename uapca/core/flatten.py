"""
Flatten -- tabular views of fitted components and distributions.

One row per component / distribution, wide columns per dimension, so the
results can be joined, filtered or handed to a plotting host as DataFrames.
"""

from typing import Iterable

import numpy as np
import polars as pl

from uapca.core.distribution import Point
from uapca.core.uapca import UaPCA


def flatten_components(pca: UaPCA) -> pl.DataFrame:
    """
    Fitted components as a DataFrame.

    Columns:
        component, eigenvalue, explained_ratio, v_0 ... v_{d-1}
    """
    ratio = pca.explained_ratio()
    rows = []
    for i in range(pca.n_components):
        row = {
            'component': i,
            'eigenvalue': float(pca.lengths[i]),
            'explained_ratio': float(ratio[i]),
        }
        for j, value in enumerate(pca.vectors[i]):
            row[f'v_{j}'] = float(value)
        rows.append(row)

    return pl.DataFrame(rows)


def flatten_distributions(distributions: Iterable) -> pl.DataFrame:
    """
    Distributions as a DataFrame.

    Columns:
        index, kind ('point' or 'normal'), mean_0 ..., var_0 ...
        (var_j is the covariance diagonal)
    """
    rows = []
    for i, d in enumerate(distributions):
        mean = np.asarray(d.mean()).reshape(-1)
        var = np.diag(np.asarray(d.covariance()))

        row = {'index': i, 'kind': 'point' if isinstance(d, Point) else 'normal'}
        for j, value in enumerate(mean):
            row[f'mean_{j}'] = float(value)
        for j, value in enumerate(var):
            row[f'var_{j}'] = float(value)
        rows.append(row)

    return pl.DataFrame(rows) if rows else pl.DataFrame()
