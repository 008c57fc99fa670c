from urllib.parse import quote

# Characters encodeURIComponent leaves alone on top of quote()'s own safe set
_URI_COMPONENT_SAFE = "!*'()"


def encode_component(value: str) -> str:
    return quote(value, safe=_URI_COMPONENT_SAFE)


def compose_body(data) -> str:
    """Plain-text body of the draft: sender details, a blank line, then the message."""
    return "\n".join([
        f"Name: {data.name}",
        f"Email: {data.email}",
        "",
        data.message,
    ])


def build_mail_target(recipient: str, subject: str, body: str) -> str:
    return f"mailto:{recipient}?subject={encode_component(subject)}&body={encode_component(body)}"
