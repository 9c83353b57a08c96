from fastapi import Request

FORM_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


async def read_body(request: Request) -> dict:
    """Return the request body as a dict, whether it was sent as JSON or as a form.

    Anything that cannot be read as a mapping comes back as an empty dict so
    handlers only have to deal with missing keys.
    """
    content_type = request.headers.get("content-type", "")

    if content_type.startswith(FORM_TYPES):
        form = await request.form()
        return dict(form)

    try:
        data = await request.json()
    except ValueError:
        return {}
    return data if isinstance(data, dict) else {}
