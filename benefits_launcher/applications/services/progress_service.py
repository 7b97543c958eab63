"""
Application Progress Service

Handles:
    - Mark a wizard step complete
    - Progress summary over the enabled steps
"""

# Database
from ...config.database import db

# Models
from ...models.application import Application

# Config
from ..config import enrollment_steps

# Exceptions
from ...util.exceptions import ServiceException

# App Messages
from ...util import messages





class ProgressService:

    def update_application_progress(self, company_id: int, step: str, commit: bool = True) -> Application:
        """
        Append `step` to completed_steps (once) and make it the current step

        Raises:
            ServiceException: the company has no application
        """

        application = Application.query.filter_by(company_id = company_id).first()

        if not application:
            raise ServiceException(
                error_code = "APPLICATION_NOT_FOUND",
                message = messages.ERROR["APPLICATION_NOT_FOUND"]
            )

        completed = list(application.completed_steps or [])
        if step not in completed:
            completed.append(step)

        # Reassign so the JSON column is flagged dirty
        application.completed_steps = completed
        application.current_step = step

        if commit:
            db.session.commit()

        return application


    def get_progress(self, application: Application) -> dict:
        enabled = enrollment_steps.get_enabled_step_ids()
        completed = list(application.completed_steps or [])
        done = [step for step in enabled if step in completed]

        return {
            "application_id": application.id,
            "completed_steps": completed,
            "current_step": application.current_step,
            "next_step": enrollment_steps.next_step(application.current_step),
            "previous_step": enrollment_steps.previous_step(application.current_step),
            "enabled_steps": enabled,
            "percent_complete": round(len(done) * 100 / len(enabled)) if enabled else 0
        }
