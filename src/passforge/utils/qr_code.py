import io

import qrcode


def secret_qr_text(secret: str, invert: bool = False) -> str:
    """
    Render a secret as a QR code made of text characters.

    Args:
        secret: Text to encode.
        invert: Swap dark and light modules (for light-on-dark terminals).

    Returns:
        The QR code as printable text.
    """
    if not secret:
        raise ValueError("secret is required")

    qr = qrcode.QRCode(border=2)
    qr.add_data(secret)
    qr.make(fit=True)

    buf = io.StringIO()
    qr.print_ascii(out=buf, invert=invert)
    return buf.getvalue()


def show_secret_qr(secret: str) -> None:
    """Print a secret's QR code so it can be scanned from the terminal."""
    print(secret_qr_text(secret, invert=True))
