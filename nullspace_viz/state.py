"""
state.py

The only mutable state in the program: three scalars behind the sliders.

Every change goes through InteractiveState.set, which clamps and snaps the
value like a range input would, then tells the listeners so they can
recompute and redraw. Nothing is cached here.
"""

import logging
import math

from . import config
from .model import ScalarParameters

logger = logging.getLogger(__name__)

FIELDS = ("b_scalar", "lambda1", "lambda2")

def snap(value, lo=config.SLIDER_MIN, hi=config.SLIDER_MAX, step=config.SLIDER_STEP):
    """Clamp to [lo, hi] and snap to the step grid starting at lo."""
    value = max(lo, min(hi, value))
    k = round((value - lo) / step)
    # Round away the 0.30000000000000004-style noise so values compare cleanly.
    return round(max(lo, min(hi, lo + k * step)), 10)

class InteractiveState:
    """Owns ScalarParameters; everyone else gets copies."""

    def __init__(self, b_scalar=config.DEFAULT_B, lambda1=config.DEFAULT_LAMBDA1,
                 lambda2=config.DEFAULT_LAMBDA2):
        self._params = ScalarParameters(snap(b_scalar), snap(lambda1), snap(lambda2))
        self._opening = self._params.copy()
        self._listeners = []

    @property
    def params(self):
        return self._params.copy()

    def get(self, name):
        if name not in FIELDS:
            raise KeyError(name)
        return getattr(self._params, name)

    def subscribe(self, listener):
        """listener(params) is called after every effective change."""
        self._listeners.append(listener)

    def set(self, name, value):
        """Update one scalar. Returns True if the stored value changed."""
        if name not in FIELDS:
            raise KeyError(name)
        value = float(value)
        if not math.isfinite(value):
            raise ValueError(f"{name} must be finite, got {value!r}")

        new = snap(value)
        old = getattr(self._params, name)
        if new == old:
            return False

        setattr(self._params, name, new)
        logger.debug("%s: %+.1f -> %+.1f", name, old, new)
        self._notify()
        return True

    def nudge(self, name, steps):
        """Move one scalar by a whole number of slider steps."""
        return self.set(name, self.get(name) + steps * config.SLIDER_STEP)

    def reset(self):
        """Back to the values the state was created with."""
        changed = False
        for name, value in zip(FIELDS, self._opening.as_tuple()):
            if getattr(self._params, name) != value:
                setattr(self._params, name, value)
                changed = True
        if changed:
            logger.debug("Parameters reset to %r", self._params)
            self._notify()
        return changed

    def _notify(self):
        params = self.params
        for listener in self._listeners:
            listener(params)
