from pyweibull.montecarlo.backends.cpu import CPUBootstrapBackend

__all__ = ["CPUBootstrapBackend"]
