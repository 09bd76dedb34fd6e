"""User-facing message strings shared by the service and API layers."""

TASK_NOT_FOUND = "Task not found"
TASK_TITLE_REQUIRED = "Title is required and must be a non-empty string"
TASK_TITLE_TOO_LONG = "Title must not exceed 255 characters"
TASK_DESCRIPTION_REQUIRED = "Description is required and must be a non-empty string"
TASK_ALREADY_COMPLETED = "Task is already completed"
INVALID_TASK_ID = "Invalid task ID"

INTERNAL_SERVER_ERROR = "Internal server error"
VALIDATION_ERROR = "Validation error"
DATABASE_ERROR = "Database operation failed"
INVALID_REQUEST = "Invalid request"

TASK_CREATED = "Task created successfully"
TASK_COMPLETED = "Task completed successfully"
SERVER_RUNNING = "Server is running"
