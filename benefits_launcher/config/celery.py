""" Celery application bound to the Flask app context... """

# Python Packages
from celery import Celery, Task

# Constants
from ..base import constants





def init_celery(app) -> Celery:
    """
    Create the Celery app for `app` and make it the default, so
    @shared_task functions run inside the Flask application context.
    """

    class FlaskTask(Task):
        def __call__(self, *args, **kwargs):
            with app.app_context():
                return self.run(*args, **kwargs)

    celery_app = Celery(app.import_name, task_cls = FlaskTask)
    celery_app.conf.update(
        broker_url = app.config.get("CELERY_BROKER_URL", constants.CELERY_BROKER_URL),
        result_backend = app.config.get("CELERY_RESULT_BACKEND", constants.CELERY_RESULT_BACKEND),
        task_always_eager = app.config.get("CELERY_TASK_ALWAYS_EAGER", constants.CELERY_TASK_ALWAYS_EAGER),
        task_ignore_result = True
    )
    celery_app.set_default()

    app.extensions["celery"] = celery_app
    return celery_app
