from flask import Blueprint, request
from app.version import API_PREFIX
from app.schemas.auth import AccountTypeRequest, RegisterRequest
from app.services import accounts
from app.utils import auth_required, create_access_token, ok, transactional, validate_schema

auth_bp = Blueprint("auth", __name__, url_prefix=f"{API_PREFIX}/auth")


def _account_payload(user):
    data = {
        "user": user.to_dict(),
        "access_token": create_access_token(user.id, user.role or ""),
    }
    if user.vendor_profile is not None:
        data["vendor_id"] = user.vendor_profile.id
    return data


@auth_bp.route("/register", methods=["POST"])
@validate_schema(RegisterRequest)
def register():
    data: RegisterRequest = request.validated_data
    with transactional("Failed to register user"):
        user = accounts.register_user(data.email, data.firstName, data.lastName, data.role)
    return ok(_account_payload(user), message="User registered successfully", status=201)


@auth_bp.route("/account-type", methods=["POST"])
@auth_required
@validate_schema(AccountTypeRequest)
def select_account_type():
    data: AccountTypeRequest = request.validated_data
    with transactional("Failed to set account type"):
        user = accounts.select_account_type(request.user, data.role)
    return ok(_account_payload(user), message="Account type selected successfully")
