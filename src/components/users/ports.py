from src.ports.clock import TimePort

__all__ = ["TimePort"]
