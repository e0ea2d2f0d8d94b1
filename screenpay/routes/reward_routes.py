from flask import Blueprint, request

from screenpay.schemas.user_schema import BalanceSchema
from screenpay.schemas.withdrawal_schema import WithdrawalSchema
from screenpay.services.reward_service import get_balance, record_upload, request_withdrawal
from screenpay.services.upload_service import save_uploaded_file
from screenpay.utils.exceptions import InvalidInput
from screenpay.utils.response_formatter import success_response

bp = Blueprint("rewards", __name__, url_prefix="/api")

balance_schema = BalanceSchema()
withdrawal_schema = WithdrawalSchema()


# ==========================================================
#  POST /api/upload
#  multipart: username (text), screenshot (file)
# ==========================================================
@bp.route("/upload", methods=["POST"])
def upload_screenshot():
    file = request.files.get("screenshot")
    if not file or not file.filename:
        raise InvalidInput("no file")

    file_path = save_uploaded_file(file)
    username, user = record_upload(request.form.get("username"), file_path)

    return success_response({
        "username": username,
        "screenshots": user.screenshots,
        "balance": float(user.balance),
    }, message="Uploaded and rewarded")


# ==========================================================
#  GET /api/balance?username=...
# ==========================================================
@bp.route("/balance", methods=["GET"])
def balance():
    username, user = get_balance(request.args.get("username"))
    return success_response(balance_schema.dump({
        "username": username,
        "screenshots": user.screenshots,
        "balance": user.balance,
        "withdraws": user.withdraws,
    }))


# ==========================================================
#  POST /api/withdraw
#  JSON: { username }
# ==========================================================
@bp.route("/withdraw", methods=["POST"])
def withdraw():
    data = request.get_json(silent=True) or {}
    if not isinstance(data, dict):
        data = {}
    _, withdrawal = request_withdrawal(data.get("username"))

    return success_response(
        {"withdraw": withdrawal_schema.dump(withdrawal)},
        message="Withdraw requested. Admin will process within 72 hours.",
    )
