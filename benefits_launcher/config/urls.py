""" Urls of the modules define here... """

# Swagger API...
from ..config.swagger import api

# All Namespaces...
from ..auth.handler import auth_namespace
from ..companies.handler import company_namespace
from ..documents.handler import document_namespace
from ..applications.handler import application_namespace
from ..plans.handler import plan_namespace
from ..brokers.handler import broker_namespace
from ..pdfs.handler import pdf_namespace
from ..admin.handler import admin_namespace
from ..features.handler import feature_namespace

NAMESPACES = (
    auth_namespace,
    company_namespace,
    document_namespace,
    application_namespace,
    plan_namespace,
    broker_namespace,
    pdf_namespace,
    admin_namespace,
    feature_namespace
)





# Adding the namespaces
class URLs:
    """ All application namespaces will be declare here... """

    @staticmethod
    def add_namespaces():
        """ Function for adding namespaces (once per process; every app created afterwards gets them)... """

        for namespace in NAMESPACES:
            if namespace not in api.namespaces:
                api.add_namespace(namespace)
