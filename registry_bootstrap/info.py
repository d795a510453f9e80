"""
Registration info endpoint for Flask services
"""

import logging
from typing import Optional

from flask import Blueprint, jsonify

from .cache import SelfInstanceCache
from .runtime import RuntimeIdentity

# Set up logging
logger = logging.getLogger(__name__)


class RegistrationInfo:
    """
    Exposes the runtime identity and the instances registered by this process
    """

    def __init__(
        self,
        app=None,
        identity: Optional[RuntimeIdentity] = None,
        cache: Optional[SelfInstanceCache] = None,
        url_prefix: str = "/registry",
    ):
        """
        Initialize the registration info endpoint

        Args:
            app: Flask application (optional)
            identity: Identity to report until update() is called
            cache: Self-instance cache to report
            url_prefix: Prefix of the endpoint (default: /registry)
        """
        self.identity = identity or RuntimeIdentity()
        self.cache = cache if cache is not None else SelfInstanceCache()
        self.blueprint = Blueprint("registration_info", __name__, url_prefix=url_prefix)

        self.blueprint.route("/self")(self.self_info)

        if app:
            self.init_app(app)

    def init_app(self, app) -> None:
        """
        Register the blueprint with a Flask app

        Args:
            app: Flask application
        """
        app.register_blueprint(self.blueprint)
        app.extensions["registration_info"] = self

    def update(self, identity: RuntimeIdentity) -> None:
        self.identity = identity
        logger.debug(f"Registration info updated: {identity.service_id}/{identity.instance_id}")

    def self_info(self):
        """Flask route handler for the registration info endpoint"""
        return jsonify(
            {
                "identity": self.identity.to_dict(),
                "instances": self.cache.items(),
            }
        )
