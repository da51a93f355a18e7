import base64
import io

import qrcode
from fastapi import Request

QR_SIZE_PX = 400
QR_BORDER = 2
QR_DARK = "#000000"
QR_LIGHT = "#FFFFFF"


def staff_verification_url(request: Request, employee_id: str) -> str:
    base_url = f"{request.url.scheme}://{request.headers.get('host') or request.url.netloc}"
    return f"{base_url}/staff/{employee_id}"


def to_png_data_url(data: str) -> str:
    qr = qrcode.QRCode(border=QR_BORDER, error_correction=qrcode.constants.ERROR_CORRECT_M)
    qr.add_data(data)
    qr.make(fit=True)

    modules = qr.modules_count + 2 * QR_BORDER
    qr.box_size = max(1, QR_SIZE_PX // modules)

    img = qr.make_image(fill_color=QR_DARK, back_color=QR_LIGHT)
    buf = io.BytesIO()
    img.save(buf, format="PNG")
    return "data:image/png;base64," + base64.b64encode(buf.getvalue()).decode("ascii")
