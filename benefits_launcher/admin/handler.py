"""
File: Admin Control Center Routes

Handles:
    - Users, brokers and applications management
    - Audit log search and CSV export
    - Platform stats

Every route requires the admin role.
"""

# Python Packages
from datetime import date

# Flask Packages
from flask import Response
from flask_restx import Namespace, Resource, fields

# Validations
from .validations.user_update_validation import UserUpdateValidation
from .validations.broker_validation import BrokerValidation
from .validations.audit_log_filter_validation import AuditLogFilterValidation
from ..applications.validations.application_validation import ApplicationValidation

# Controller
from .controller import AdminController

# Helpers
from ..util.access import AccessControl
from ..util.request_data import get_json_body, get_query_args

# App Messages
from ..util import messages

# Errors & Exceptions
from ..util.exceptions import AppException, InternalServerException

# Namespaces
admin_namespace = Namespace('admin', description = 'Admin Control Center APIs')

AUDIT_FILTERS = ("user_id", "action", "entity_type", "entity_id", "from_date", "to_date", "limit")


user_update_model = admin_namespace.model('AdminUserUpdate', {
    'active': fields.Boolean,
    'role': fields.String(description = 'admin / owner / staff / employer')
})

broker_owner_model = admin_namespace.model('AdminBrokerOwner', {
    'username': fields.String(required = True),
    'password': fields.String(required = True),
    'email': fields.String(required = True),
    'name': fields.String
})

broker_create_model = admin_namespace.model('AdminBrokerCreate', {
    'agency_name': fields.String(required = True),
    'contact_email': fields.String,
    'contact_phone': fields.String,
    'color_primary': fields.String,
    'color_secondary': fields.String,
    'owner': fields.Nested(broker_owner_model)
})

broker_enabled_model = admin_namespace.model('AdminBrokerEnabled', {
    'enabled': fields.Boolean(required = True)
})

broker_flag_model = admin_namespace.model('AdminBrokerFlag', {
    'flagged': fields.Boolean(required = True)
})

application_update_model = admin_namespace.model('AdminApplicationUpdate', {
    'status': fields.String,
    'selected_carrier': fields.String,
    'current_step': fields.String,
    'completed_steps': fields.List(fields.String)
})





@admin_namespace.route('/users')
class AdminUsers(Resource):

    def get(self):
        """
        All users with their agency name and active flag
        """

        try:
            AccessControl.require_admin()
            result = AdminController().list_users()

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@admin_namespace.route('/users/<int:user_id>')
class AdminUser(Resource):

    @admin_namespace.expect(user_update_model)
    def patch(self, user_id):
        """
        Activate / deactivate a user or change their role
        """

        try:
            admin = AccessControl.require_admin()

            args = get_json_body()
            UserUpdateValidation().validate(args)

            result = AdminController().update_user(admin, user_id, args)

            return {
                "status": "success",
                "message": messages.SUCCESS["USER_UPDATE_SUCCESS"],
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@admin_namespace.route('/brokers')
class AdminBrokers(Resource):

    def get(self):
        """
        Agencies with user and company counts
        """

        try:
            AccessControl.require_admin()
            result = AdminController().list_brokers()

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code


    @admin_namespace.expect(broker_create_model)
    def post(self):
        """
        Create an agency, optionally with its owner account
        """

        try:
            admin = AccessControl.require_admin()

            args = get_json_body()
            BrokerValidation().validate_create(args)

            result = AdminController().create_broker(admin, args)

            return {
                "status": "success",
                "data": result
            }, 201

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@admin_namespace.route('/brokers/<string:broker_id>')
class AdminBroker(Resource):

    @admin_namespace.expect(broker_enabled_model)
    def patch(self, broker_id):
        """
        Enable or disable an agency
        """

        try:
            admin = AccessControl.require_admin()

            args = get_json_body()
            BrokerValidation().validate_toggle(args, "enabled")

            result = AdminController().set_broker_enabled(admin, broker_id, args["enabled"])

            return {
                "status": "success",
                "message": messages.SUCCESS["BROKER_UPDATE_SUCCESS"],
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@admin_namespace.route('/brokers/<string:broker_id>/flag')
class AdminBrokerFlag(Resource):

    @admin_namespace.expect(broker_flag_model)
    def patch(self, broker_id):
        """
        Flag an agency for review
        """

        try:
            admin = AccessControl.require_admin()

            args = get_json_body()
            BrokerValidation().validate_toggle(args, "flagged")

            result = AdminController().set_broker_flagged(admin, broker_id, args["flagged"])

            return {
                "status": "success",
                "message": messages.SUCCESS["BROKER_FLAG_SUCCESS"],
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@admin_namespace.route('/applications')
class AdminApplications(Resource):

    @admin_namespace.doc(params = {'status': 'Filter by application status'})
    def get(self):
        """
        All applications with company name and owning user
        """

        try:
            AccessControl.require_admin()

            status = get_query_args("status").get("status")
            result = AdminController().list_applications(status)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@admin_namespace.route('/applications/<int:application_id>')
class AdminApplication(Resource):

    @admin_namespace.expect(application_update_model)
    def patch(self, application_id):
        """
        Update status or progress fields of any application
        """

        try:
            admin = AccessControl.require_admin()

            args = get_json_body()
            ApplicationValidation().validate_update(args)

            result = AdminController().update_application(admin, application_id, args)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@admin_namespace.route('/audit-logs')
class AdminAuditLogs(Resource):

    @admin_namespace.doc(params = {name: 'Optional filter' for name in AUDIT_FILTERS})
    def get(self):
        """
        Audit trail, newest first (default limit 50)
        """

        try:
            AccessControl.require_admin()

            filters = AuditLogFilterValidation().validate(get_query_args(*AUDIT_FILTERS))
            result = AdminController().list_audit_logs(filters)

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@admin_namespace.route('/audit-logs/export')
class AdminAuditLogExport(Resource):

    @admin_namespace.doc(params = {name: 'Optional filter' for name in AUDIT_FILTERS})
    def get(self):
        """
        Audit trail as a CSV download
        """

        try:
            AccessControl.require_admin()

            filters = AuditLogFilterValidation().validate(get_query_args(*AUDIT_FILTERS))
            content = AdminController().export_audit_logs(filters)

            return Response(
                content,
                mimetype = "text/csv",
                headers = {
                    "Content-Disposition": f"attachment; filename=audit-logs-{date.today().isoformat()}.csv"
                }
            )

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code



@admin_namespace.route('/stats')
class AdminStats(Resource):

    def get(self):
        """
        Counts of users, brokers, companies and applications by status
        """

        try:
            AccessControl.require_admin()
            result = AdminController().get_stats()

            return {
                "status": "success",
                "data": result
            }, 200

        except AppException as error:
            return error.to_dict(), error.status_code

        except Exception as error:
            error = InternalServerException(details = str(error))
            return error.to_dict(), error.status_code
