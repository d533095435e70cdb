from datetime import datetime
from enum import Enum
from pydantic import BaseModel, Field, ConfigDict, computed_field, field_validator, model_validator
from typing import Any, ClassVar, List, Optional

# 레시피 카테고리 ("All"은 필터 해제용)
CATEGORIES = ["Breakfast", "Lunch", "Dinner", "Dessert", "Snack", "Drink"]
ALL_CATEGORIES = "All"


class CurrentUser(BaseModel):
    """Identity Provider가 반환하는 현재 로그인 사용자"""
    id: str
    email: Optional[str] = None


class LikeState(BaseModel):
    """
    한 (사용자, 레시피) 쌍에 대해 화면에 표시되는 좋아요 상태.

    저장되지 않는 파생 값이며, 매 연산(fetch/toggle/refresh)이 새 인스턴스를 반환합니다.
    """
    model_config = ConfigDict(frozen=True)

    liked: bool = Field(False, description="현재 사용자가 좋아요 했는지 여부")
    count: int = Field(0, ge=0, description="레시피의 전체 좋아요 수")


class FavoriteRow(BaseModel):
    """favorites 테이블 레코드"""
    user_id: str
    recipe_id: str
    created_at: Optional[datetime] = None


# Profile DTO
class ProfileSummary(BaseModel):
    """작성자 표시용 profiles 일부 컬럼 (full_name, username)"""
    full_name: Optional[str] = None
    username: Optional[str] = None

    @property
    def display_name(self) -> str:
        return self.full_name or self.username or "Anonymous"


class Profile(BaseModel):
    """profiles 테이블 레코드 (id = auth.users.id)"""
    id: str
    email: Optional[str] = None
    username: Optional[str] = None
    full_name: Optional[str] = None
    bio: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @field_validator('id', mode='before')
    @classmethod
    def coerce_id(cls, v: Any) -> str:
        return str(v)


class ProfileUpdate(BaseModel):
    """
    프로필 수정 요청

    - email, username, full_name: 필수 (앞뒤 공백 제거 후 비어 있으면 422)
    - bio: 선택 (공백만 있으면 null로 저장)
    """
    email: str
    username: str
    full_name: str
    bio: Optional[str] = None

    @field_validator('email', 'username', 'full_name')
    @classmethod
    def strip_and_require(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("field must not be empty")
        return v

    @field_validator('email')
    @classmethod
    def validate_email(cls, v: str) -> str:
        local, _, domain = v.partition("@")
        if not local or "." not in domain:
            raise ValueError("invalid email address")
        return v

    @field_validator('bio')
    @classmethod
    def blank_bio_to_none(cls, v: Optional[str]) -> Optional[str]:
        if v is None or not v.strip():
            return None
        return v.strip()


# Comment DTO


class Comment(BaseModel):
    """Comment (comments 테이블 + profiles join)"""
    model_config = ConfigDict(populate_by_name=True)

    id: str
    recipe_id: Optional[str] = None
    user_id: str
    content: str
    created_at: Optional[datetime] = None
    author: Optional[ProfileSummary] = Field(None, alias="profiles")

    @field_validator('id', mode='before')
    @classmethod
    def coerce_id(cls, v: Any) -> str:
        """DB에서 int/uuid로 오는 id를 문자열로 통일"""
        return str(v)

    @computed_field
    @property
    def display_name(self) -> str:
        return self.author.display_name if self.author else "Anonymous"


class CommentCreate(BaseModel):
    """댓글 작성 요청"""
    content: str = Field(..., description="댓글 내용 (앞뒤 공백 제거 후 비어 있으면 안 됨)")

    @field_validator('content')
    @classmethod
    def strip_and_require(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("content must not be empty")
        return v


# Recipe DTO
class Difficulty(str, Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class Recipe(BaseModel):
    """recipes 테이블 레코드"""
    id: str
    created_at: Optional[datetime] = None
    user_id: str
    title: str
    description: Optional[str] = None
    ingredients: List[str] = Field(default_factory=list)
    instructions: List[str] = Field(default_factory=list)
    cooking_time: Optional[int] = Field(None, description="조리 시간(분)")
    difficulty: Optional[Difficulty] = None
    category: str
    image_url: Optional[str] = None

    @field_validator('id', mode='before')
    @classmethod
    def coerce_id(cls, v: Any) -> str:
        return str(v)

    @field_validator('ingredients', 'instructions', mode='before')
    @classmethod
    def handle_null_lists(cls, v: Any) -> List[str]:
        """DB에서 null로 오는 배열 컬럼을 빈 리스트로 변환"""
        if v is None:
            return []
        return v


class RecipeDetail(Recipe):
    """레시피 상세 (작성자 프로필 포함)"""
    uploader: Optional[ProfileSummary] = None

    @computed_field
    @property
    def uploader_name(self) -> str:
        return self.uploader.display_name if self.uploader else "Anonymous"


def _clean_lines(values: List[str]) -> List[str]:
    return [item.strip() for item in values if item and item.strip()]


class RecipeCreate(BaseModel):
    """레시피 작성 요청 (필수값: title, category, ingredients, instructions)"""
    title: str = Field(..., min_length=1)
    description: Optional[str] = None
    ingredients: List[str] = Field(..., description="재료 목록 (최소 1개)")
    instructions: List[str] = Field(..., description="조리 순서 (최소 1개)")
    cooking_time: Optional[int] = Field(None, gt=0)
    difficulty: Optional[Difficulty] = None
    category: str
    image_url: Optional[str] = None

    @field_validator('title')
    @classmethod
    def strip_title(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("title must not be empty")
        return v

    @field_validator('ingredients', 'instructions')
    @classmethod
    def require_lines(cls, v: List[str]) -> List[str]:
        cleaned = _clean_lines(v)
        if not cleaned:
            raise ValueError("at least one entry is required")
        return cleaned

    @field_validator('category')
    @classmethod
    def validate_category(cls, v: str) -> str:
        if v not in CATEGORIES:
            raise ValueError(f"category must be one of {CATEGORIES}")
        return v


class RecipeUpdate(BaseModel):
    """레시피 부분 수정 요청 (전달된 필드만 반영)"""
    REQUIRED_FIELDS: ClassVar[tuple[str, ...]] = ("title", "category", "ingredients", "instructions")

    title: Optional[str] = None
    description: Optional[str] = None
    ingredients: Optional[List[str]] = None
    instructions: Optional[List[str]] = None
    cooking_time: Optional[int] = Field(None, gt=0)
    difficulty: Optional[Difficulty] = None
    category: Optional[str] = None
    image_url: Optional[str] = None

    @field_validator('title')
    @classmethod
    def strip_title(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        v = v.strip()
        if not v:
            raise ValueError("title must not be empty")
        return v

    @field_validator('ingredients', 'instructions')
    @classmethod
    def require_lines(cls, v: Optional[List[str]]) -> Optional[List[str]]:
        if v is None:
            return v
        cleaned = _clean_lines(v)
        if not cleaned:
            raise ValueError("at least one entry is required")
        return cleaned

    @field_validator('category')
    @classmethod
    def validate_category(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and v not in CATEGORIES:
            raise ValueError(f"category must be one of {CATEGORIES}")
        return v

    @model_validator(mode='after')
    def reject_null_required(self) -> "RecipeUpdate":
        # 필수 컬럼은 생략은 가능하지만 null로 지울 수는 없음
        cleared = [f for f in self.REQUIRED_FIELDS if f in self.model_fields_set and getattr(self, f) is None]
        if cleared:
            raise ValueError(f"{', '.join(cleared)} cannot be null")
        return self
