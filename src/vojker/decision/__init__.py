from .engine import Decision, Go, NoGo, decide, state_path

__all__ = ["Decision", "Go", "NoGo", "decide", "state_path"]
