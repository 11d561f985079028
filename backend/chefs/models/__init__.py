from chefs.models.form import Form, FormVersion
from chefs.models.submission import FormSubmission, SubmissionData
from chefs.models.access import UserFormAccess

__all__ = [
    "Form",
    "FormVersion",
    "FormSubmission",
    "SubmissionData",
    "UserFormAccess",
]
