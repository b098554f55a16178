from .eval_logger import EvalLog

__all__ = ["EvalLog"]
