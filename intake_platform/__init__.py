"""Platform layer: stateful orchestration of the add-repository workflow."""

__version__ = "1.0.0"

from .facade import AddRepositoryFacade, SubmissionNotAllowedError
from .git_repository import GitRepositoryClassifier, GitTrustStore, parse_dubious_ownership
from .mappers import (
    classification_to_contract,
    contract_to_classification,
    repository_to_contract,
    snapshot_to_contract,
)
from .trust_resolver import TrustResolver
from .user_config import UserConfigRegistrar, get_repositories
from .validation_controller import ValidationController

__all__ = [
    "__version__",
    "AddRepositoryFacade",
    "SubmissionNotAllowedError",
    "GitRepositoryClassifier",
    "GitTrustStore",
    "parse_dubious_ownership",
    "classification_to_contract",
    "contract_to_classification",
    "repository_to_contract",
    "snapshot_to_contract",
    "TrustResolver",
    "UserConfigRegistrar",
    "get_repositories",
    "ValidationController",
]
