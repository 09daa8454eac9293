"""Profile blueprint for the signed-in user."""

from flask import Blueprint, g, jsonify

from app.auth.middleware import auth_required

profile_bp = Blueprint("profile", __name__, url_prefix="/api/profile")


@profile_bp.route("", methods=["GET"])
@auth_required
def get_profile():
    """Return the stored identity profile unchanged."""
    return jsonify(g.profile.to_dict()), 200
