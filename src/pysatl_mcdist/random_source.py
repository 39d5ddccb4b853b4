"""
Random Sources
==============

Uniform random sources consumed by :meth:`Distribution.sample`.

Every sampling call accepts an explicit :class:`numpy.random.Generator`. When
none is given, the calling thread's default source is used. Default sources
are derived from a global seed with :class:`numpy.random.SeedSequence`, so a
run is reproducible for a given seed while threads never share a generator.

Notes
-----
- ``set_seed`` invalidates the default sources of all threads; each thread
  lazily rebuilds its source on the next draw.
- ``particle_random_source`` gives a reproducible stream for one particle
  history, independent of the thread that transports it.
"""

from __future__ import annotations

__author__ = "Artem Romanyuk"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import itertools
import threading

import numpy as np

DEFAULT_SEED: int = 1
"""Seed used until :func:`set_seed` is called."""

_THREAD_STREAM = 0
_PARTICLE_STREAM = 1

_lock = threading.Lock()
_local = threading.local()
_seed: int = DEFAULT_SEED
_epoch: int = 0
_thread_index = itertools.count()


def set_seed(seed: int) -> None:
    """
    Set the global seed and reset the default sources of all threads.

    Parameters
    ----------
    seed : int
        Non-negative seed.

    Raises
    ------
    ValueError
        If ``seed`` is negative.
    """
    global _seed, _epoch, _thread_index
    if seed < 0:
        raise ValueError(f"Seed must be non-negative, got {seed}")
    with _lock:
        _seed = int(seed)
        _epoch += 1
        _thread_index = itertools.count()


def get_seed() -> int:
    """Return the current global seed."""
    return _seed


def _stream(seed: int, *spawn_key: int) -> np.random.Generator:
    return np.random.default_rng(np.random.SeedSequence(entropy=seed, spawn_key=spawn_key))


def default_random_source() -> np.random.Generator:
    """
    Return the default random source of the calling thread.

    Returns
    -------
    numpy.random.Generator
        Generator owned by the calling thread.
    """
    if getattr(_local, "epoch", None) != _epoch:
        with _lock:
            index = next(_thread_index)
            _local.rng = _stream(_seed, _THREAD_STREAM, index)
            _local.epoch = _epoch
    rng: np.random.Generator = _local.rng
    return rng


def particle_random_source(particle_id: int, seed: int | None = None) -> np.random.Generator:
    """
    Return a reproducible random source for one particle history.

    Parameters
    ----------
    particle_id : int
        Non-negative particle index.
    seed : int, optional
        Seed to derive the stream from (defaults to the global seed).

    Returns
    -------
    numpy.random.Generator
        Independent generator for the particle.

    Raises
    ------
    ValueError
        If ``particle_id`` is negative.
    """
    if particle_id < 0:
        raise ValueError(f"Particle id must be non-negative, got {particle_id}")
    return _stream(_seed if seed is None else seed, _PARTICLE_STREAM, particle_id)


def resolve_random_source(rng: np.random.Generator | None) -> np.random.Generator:
    """Return ``rng`` or, when it is ``None``, the calling thread's default source."""
    return default_random_source() if rng is None else rng


__all__ = [
    "DEFAULT_SEED",
    "set_seed",
    "get_seed",
    "default_random_source",
    "particle_random_source",
    "resolve_random_source",
]
