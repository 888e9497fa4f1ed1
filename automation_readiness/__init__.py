from automation_readiness.scoring import ReadinessEvaluator, ReadinessResult, evaluate

__all__ = ["ReadinessEvaluator", "ReadinessResult", "evaluate"]
