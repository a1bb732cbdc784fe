"""Request builders shared by the API tests."""


def user_payload(actor: str, name: str, **overrides) -> dict:
    payload = {
        "actor": actor,
        "name": name,
        "birthdate": "1990-05-17",
        "weight": 70.0,
        "height": 1.8,
        "favouriteColor": "Blue",
    }
    payload.update(overrides)
    return payload
