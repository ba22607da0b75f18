from .batch import RecoveryOutcome, SecretRecoveryRunner, load_document, solve_document

__all__ = ["RecoveryOutcome", "SecretRecoveryRunner", "load_document", "solve_document"]
