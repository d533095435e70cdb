from app.exception.base_exception import BaseCustomException, ErrorCode

class RecipeNotFoundError(BaseCustomException):
    error_code = ErrorCode.RECIPE_NOT_FOUND
    message = "레시피가 존재하지 않습니다."
    status_code = 404

class CommentNotFoundError(BaseCustomException):
    error_code = ErrorCode.COMMENT_NOT_FOUND
    message = "댓글이 존재하지 않습니다."
    status_code = 404

class ProfileNotFoundError(BaseCustomException):
    error_code = ErrorCode.PROFILE_NOT_FOUND
    message = "프로필이 존재하지 않습니다."
    status_code = 404
