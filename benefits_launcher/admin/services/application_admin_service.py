"""
Application Administration Service
"""

# Database
from ...config.database import db

# Models
from ...models.application import Application
from ...models.company import Company
from ...models.user import User

# Services
from ...applications.services.application_service import ApplicationService





class ApplicationAdminService:

    def list_applications(self, status: str = None) -> list:
        query = (
            db.session.query(Application, Company, User)
            .join(Company, Application.company_id == Company.id)
            .join(User, Company.user_id == User.id)
        )

        if status:
            query = query.filter(Application.status == status)

        rows = query.order_by(Application.updated_at.desc(), Application.id.desc()).all()

        applications = []
        for application, company, owner in rows:
            data = application.to_dict()
            data["company_name"] = company.name
            data["owner"] = {
                "id": owner.id,
                "username": owner.username,
                "name": owner.name,
                "email": owner.email
            }
            applications.append(data)

        return applications


    def update_application(self, admin, application_id: int, args: dict) -> dict:
        service = ApplicationService()
        application = service.get_application(application_id)
        return service.update_application(admin, application, args)
