from .orchestrator import GitExpressOrchestrator, RunLog, RunRequest

__all__ = ["GitExpressOrchestrator", "RunLog", "RunRequest"]
