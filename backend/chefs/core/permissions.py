"""
Capability codes granted to a user on a form.
"""
import enum


class Permissions(str, enum.Enum):
    FORM_API_CREATE = "form_api_create"
    FORM_API_READ = "form_api_read"
    FORM_API_UPDATE = "form_api_update"
    FORM_API_DELETE = "form_api_delete"
    FORM_READ = "form_read"
    FORM_UPDATE = "form_update"
    FORM_DELETE = "form_delete"
    DESIGN_CREATE = "design_create"
    DESIGN_READ = "design_read"
    DESIGN_UPDATE = "design_update"
    DESIGN_DELETE = "design_delete"
    SUBMISSION_CREATE = "submission_create"
    SUBMISSION_READ = "submission_read"
    SUBMISSION_UPDATE = "submission_update"
    SUBMISSION_DELETE = "submission_delete"
    TEAM_READ = "team_read"
    TEAM_UPDATE = "team_update"
