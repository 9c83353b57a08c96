from fastapi import APIRouter, Depends

from core.body import read_body
from core.errors import sign_required, horoscope_not_found
from horoscope.data import lookup_horoscope
from horoscope.schemas import HoroscopeRequest, HoroscopeResponse, HoroscopeError

router = APIRouter(tags=["Horoscope"])


@router.post(
    "/horoscope",
    response_model=HoroscopeResponse,
    responses={400: {"model": HoroscopeError}, 404: {"model": HoroscopeError}},
)
async def horoscope(body: dict = Depends(read_body)):
    payload = HoroscopeRequest.model_validate(body)
    if not payload.sign:
        raise sign_required()

    description = lookup_horoscope(payload.sign)
    if description is None:
        raise horoscope_not_found()

    return {"description": description}
