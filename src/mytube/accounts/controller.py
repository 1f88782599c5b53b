from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.validators import validate_password, validate_username
from ..container import Container
from ..core.exceptions import AuthenticationError, UsernameConflictError, ValidationError

INVALID_CREDENTIALS = "invalid username or password"


def _credentials() -> tuple[str, str]:
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        raise ValidationError("request body must be a JSON object")

    username = payload.get("username")
    password = payload.get("password")
    if not isinstance(username, str) or not isinstance(password, str):
        raise ValidationError("username and password must be strings")

    return validate_username(username), validate_password(password)


def register(app: Flask, container: Container) -> None:
    log = container.logger

    def _system_error(action: str, exc: Exception):
        log.exception("unexpected error during %s", action)
        if bool(app.config.get("DEBUG", False)):
            return jsonify(error=f"system error during {action}: {exc}"), 500
        return jsonify(error=f"system error during {action}"), 500

    @app.route("/api/accounts/signup", methods=["POST"], endpoint="signup")
    def signup():
        try:
            username, password = _credentials()
            account = container.auth_service.sign_up(username, password)
            return jsonify(account.to_public_dict()), 201
        except ValidationError as e:
            return jsonify(error=str(e)), 400
        except UsernameConflictError:
            return jsonify(error="username is already used"), 409
        except Exception as e:
            return _system_error("sign up", e)

    @app.route("/api/accounts/signin", methods=["POST"], endpoint="signin")
    def signin():
        try:
            username, password = _credentials()
            account = container.auth_service.sign_in(username, password)
            return jsonify(account.to_public_dict()), 200
        except ValidationError as e:
            return jsonify(error=str(e)), 400
        except AuthenticationError:
            # Unknown user and wrong password look the same from outside.
            return jsonify(error=INVALID_CREDENTIALS), 401
        except Exception as e:
            return _system_error("sign in", e)
