import pytest

from horoscope.data import HOROSCOPES, lookup_horoscope
from horoscope.schemas import HoroscopeRequest


def test_table_has_twelve_lowercase_signs():
    assert len(HOROSCOPES) == 12
    assert all(sign == sign.lower() for sign in HOROSCOPES)


def test_table_is_read_only():
    with pytest.raises(TypeError):
        HOROSCOPES["ophiuchus"] = "New sign"


def test_lookup_ignores_case():
    assert lookup_horoscope("LeO") == "Your charisma shines bright today!"
    assert lookup_horoscope("pluto") is None


def test_known_sign_upper_case(client):
    response = client.post("/api/horoscope", json={"sign": "LEO"})

    assert response.status_code == 200
    assert response.json() == {"description": "Your charisma shines bright today!"}


@pytest.mark.parametrize("sign", sorted(HOROSCOPES))
def test_every_sign_returns_its_text(client, sign):
    response = client.post("/api/horoscope", json={"sign": sign.title()})

    assert response.status_code == 200
    assert response.json()["description"] == HOROSCOPES[sign]


def test_unknown_sign(client):
    response = client.post("/api/horoscope", json={"sign": "pluto"})

    assert response.status_code == 404
    assert response.json() == {"error": "Horoscope not found."}


@pytest.mark.parametrize("body", [{}, {"sign": ""}, {"sign": None}, {"planet": "mars"}])
def test_missing_sign(client, body):
    response = client.post("/api/horoscope", json=body)

    assert response.status_code == 400
    assert response.json() == {"error": "Sign is required."}


def test_empty_body(client):
    response = client.post("/api/horoscope")

    assert response.status_code == 400
    assert response.json() == {"error": "Sign is required."}


def test_malformed_json(client):
    response = client.post(
        "/api/horoscope",
        content=b"{not json",
        headers={"content-type": "application/json"},
    )

    assert response.status_code == 400


def test_url_encoded_body(client):
    response = client.post("/api/horoscope", data={"sign": "pisces"})

    assert response.status_code == 200
    assert response.json() == {"description": "Follow your intuition today."}


@pytest.mark.parametrize("body", [{"sign": "virgo"}, {"sign": "pluto"}, {}])
def test_root_mount_matches_api_mount(client, body):
    api = client.post("/api/horoscope", json=body)
    legacy = client.post("/horoscope", json=body)

    assert api.status_code == legacy.status_code
    assert api.json() == legacy.json()


def test_request_model_defaults_to_no_sign():
    assert HoroscopeRequest.model_validate({}).sign is None
    assert HoroscopeRequest.model_validate({"sign": "leo", "extra": 1}).sign == "leo"


def test_json_array_body_counts_as_missing_sign(client):
    response = client.post("/api/horoscope", json=["leo"])

    assert response.status_code == 400
    assert response.json() == {"error": "Sign is required."}


def test_numeric_sign_is_not_found(client):
    response = client.post("/api/horoscope", json={"sign": 5})

    assert response.status_code == 404
    assert response.json() == {"error": "Horoscope not found."}
