from boundednumbers import clamp, bounce
import numpy as np
from typing import Callable
from .color_base import ColorBase


def make_arithmetic(color: ColorBase, overflow_function: Callable = clamp):
    """
    Wrap a ColorBase instance with arithmetic behavior.
    Arithmetic persists through operations and conversions.

    - Operands are combined in the normalized float domain, so integer
      storage never truncates halfway through an expression
    - Color operands are converted to the wrapped color's space and storage
      type first; plain numbers are taken as normalized values
    - The overflow function (default: clamp, or e.g. bounce) brings every
      channel back into [0, 1] before it is stored again
    """
    class ArithmeticProxy:
        __slots__ = ("_base", "_overflow_fn")

        def __init__(self, base: ColorBase):
            self._base = base
            self._overflow_fn = overflow_function

        # -----------------------
        # Transparent forwarding
        # -----------------------
        def __getattr__(self, name):
            """Forward attribute access to the wrapped ColorBase instance,
            except convert(), which is wrapped to return another proxy."""
            attr = getattr(self._base, name)

            if name == "convert" and callable(attr):
                def wrapped_convert(*args, **kwargs):
                    new_base = attr(*args, **kwargs)
                    return ArithmeticProxy(new_base)
                return wrapped_convert

            return attr

        def unwrap(self):
            """Return the underlying raw ColorBase instance."""
            return self._base

        # -----------------------
        # Core arithmetic engine
        # -----------------------
        def _operate(self, other, op):
            if isinstance(other, ArithmeticProxy):
                other = other._base

            if isinstance(other, ColorBase):
                other = other.convert(self._base.mode, self._base.component_type).normalized

            a = np.asarray(self._base.normalized, dtype=float)
            b = np.asarray(other, dtype=float)

            with np.errstate(divide="ignore", invalid="ignore"):
                result = op(a, b)

            # boundednumbers functions take scalars
            result = np.vectorize(self._overflow_fn, otypes=[float])(result, 0.0, 1.0)
            stored = self._base.component.from_normalized(result)

            if not self._base.is_array and np.ndim(stored) == 1:
                stored = tuple(stored)
            new_base = self._base.__class__(stored)

            return ArithmeticProxy(new_base)

        # -----------------------
        # Operator overloads
        # -----------------------
        def __add__(self, other):
            return self._operate(other, np.add)

        def __sub__(self, other):
            return self._operate(other, np.subtract)

        def __mul__(self, other):
            return self._operate(other, np.multiply)

        def __truediv__(self, other):
            return self._operate(other, np.divide)

        def __radd__(self, other):
            return self.__add__(other)

        def __rsub__(self, other):
            # other - self
            return self._operate(other, lambda a, b: np.subtract(b, a))

        def __rmul__(self, other):
            return self.__mul__(other)

        def __rtruediv__(self, other):
            # other / self
            return self._operate(other, lambda a, b: np.divide(b, a))

        def __eq__(self, other):
            if isinstance(other, ArithmeticProxy):
                other = other._base
            return self._base == other

        __hash__ = None

        # -----------------------
        # Representation
        # -----------------------
        def __repr__(self):
            return f"ArithmeticProxy({self._base!r})"

    return ArithmeticProxy(color)


# Add arithmetic operators to ColorBase to auto-wrap on first use
def _auto_arithmetic_operation(op_name):
    """Create an operator that auto-wraps ColorBase with default arithmetic."""
    def operation(self, other):
        proxy = make_arithmetic(self, overflow_function=clamp)
        return getattr(proxy, op_name)(other)
    return operation


ColorBase.__add__ = _auto_arithmetic_operation('__add__')
ColorBase.__sub__ = _auto_arithmetic_operation('__sub__')
ColorBase.__mul__ = _auto_arithmetic_operation('__mul__')
ColorBase.__truediv__ = _auto_arithmetic_operation('__truediv__')
ColorBase.__radd__ = _auto_arithmetic_operation('__radd__')
ColorBase.__rsub__ = _auto_arithmetic_operation('__rsub__')
ColorBase.__rmul__ = _auto_arithmetic_operation('__rmul__')
ColorBase.__rtruediv__ = _auto_arithmetic_operation('__rtruediv__')

__all__ = ["make_arithmetic", "clamp", "bounce"]
