"""Classic numerical methods: roots, interpolation, integration, ODEs, linear systems and PDEs."""

__version__ = "0.1.0"

__all__ = ["cli", "integration", "interpolation", "linear", "ode", "pde", "roots"]