from flask import Blueprint, request

from screenpay.schemas.withdrawal_schema import WithdrawalSchema
from screenpay.services.admin_service import update_withdrawal_status
from screenpay.utils.response_formatter import success_response

bp = Blueprint("admin", __name__, url_prefix="/api/admin")

withdrawal_schema = WithdrawalSchema()


# ==========================================================
#  POST /api/admin/update_withdraw
#  Header: x-admin-secret
#  JSON: { username, withdrawId, status }
# ==========================================================
@bp.route("/update_withdraw", methods=["POST"])
def update_withdraw():
    data = request.get_json(silent=True) or {}
    if not isinstance(data, dict):
        data = {}

    withdrawal = update_withdrawal_status(
        request.headers.get("x-admin-secret", ""),
        data.get("username"),
        data.get("withdrawId"),
        data.get("status"),
    )

    return success_response({"withdraw": withdrawal_schema.dump(withdrawal)}, message="updated")
