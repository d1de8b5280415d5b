from __future__ import annotations


class RecipeError(Exception):
    pass


class InvalidInputError(RecipeError):
    def __init__(self, message: str = "Invalid input"):
        super().__init__(message)


class InvalidRecipeIdError(InvalidInputError):
    def __init__(self, recipe_id: str):
        super().__init__(f"Invalid recipe id: {recipe_id}")
        self.recipe_id = recipe_id


class RecipeNotFoundError(RecipeError):
    def __init__(self, recipe_id: str):
        super().__init__(f"Recipe not found: {recipe_id}")
        self.recipe_id = recipe_id


class RecipeStoreError(RecipeError):
    def __init__(self, operation: str, reason: str):
        super().__init__(f"Recipe store error during {operation}: {reason}")
        self.operation = operation
        self.reason = reason


class CacheError(RecipeError):
    def __init__(self, operation: str, reason: str):
        super().__init__(f"Listing cache error during {operation}: {reason}")
        self.operation = operation
        self.reason = reason


class SerializationError(RecipeError):
    def __init__(self, reason: str):
        super().__init__(f"Cannot decode cached recipe listing: {reason}")
        self.reason = reason
