from .disambiguation import DisambiguationStrategyProtocol

__all__ = ["DisambiguationStrategyProtocol"]
