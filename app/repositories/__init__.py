from app.repositories.base import (
    IFavoriteRepository, ICommentRepository, IRecipeRepository, IProfileRepository, IIdentityProvider
)
from app.repositories.memory import (
    MockFavoriteRepository, MockCommentRepository, MockRecipeRepository, MockProfileRepository
)

__all__ = [
    "IFavoriteRepository",
    "ICommentRepository",
    "IRecipeRepository",
    "IProfileRepository",
    "IIdentityProvider",
    "MockFavoriteRepository",
    "MockCommentRepository",
    "MockRecipeRepository",
    "MockProfileRepository",
]
