""" Swagger configuration defined here... """

# Python Packages
from flask_restx import Api

# Constants
from ..base import constants





def build_api():
    """
    Build the Swagger-enabled Api.
    One Api per application so repeated create_app() calls never
    share registered endpoints.
    """

    if constants.APP_ENV != "production":
        doc = '/swagger/'
    else:
        doc = False

    return Api(
        title = constants.SWAGGER_APP_PROPS['name'],
        version = constants.SWAGGER_APP_PROPS['version'],
        description = constants.SWAGGER_APP_PROPS['description'],
        doc = doc
    )
