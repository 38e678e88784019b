from klotski.engine.graphbuilder.builder import DecisionGraphBuilder, describe_move

__all__ = ["DecisionGraphBuilder", "describe_move"]
