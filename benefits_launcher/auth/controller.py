"""
Auth Controller

Handles:
    - Orchestration between handler and auth service
"""

# Services
from .services.auth_service import AuthService





class AuthController:

    def __init__(self):
        """ Initialize controller with service instances... """

        self.auth_service = AuthService()


    def register(self, args: dict) -> dict:
        return self.auth_service.register(args)


    def login(self, args: dict) -> dict:
        return self.auth_service.login(args["username"], args["password"])


    def logout(self, user) -> dict:
        return self.auth_service.logout(user)


    def check_availability(self, args: dict) -> dict:
        return self.auth_service.check_availability(
            username = args.get("username"),
            email = args.get("email")
        )


    def change_password(self, user, args: dict) -> dict:
        return self.auth_service.change_password(
            user,
            current_password = args["current_password"],
            new_password = args["new_password"]
        )
