"""Position-space QED kernel assembly from form-factor derivatives, and its symmetrisation."""

__version__ = "0.14.0"
__all__ = [
    "axis",
    "axis_high",
    "axis_low",
    "cheby",
    "generic",
    "generic_high",
    "generic_low",
    "kernels",
    "stv",
    "symxy",
    "symxy0",
]