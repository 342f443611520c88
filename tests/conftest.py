"""Fixtures compartidas por las pruebas."""

import pytest

from directorio.core.viewmodel import DirectoryController
from directorio.infrastructure.repositories import UserRepository


def _usuario(user_id, name, email, company=None, city=None):
    datos = {
        "id": user_id,
        "name": name,
        "username": name.split()[0],
        "email": email,
        "phone": "1-770-736-8031",
    }
    if company is not None:
        datos["company"] = {"name": company, "catchPhrase": "Multi-layered client-server"}
    if city is not None:
        datos["address"] = {"street": "Kulas Light", "city": city, "zipcode": "92998-3874"}
    return datos


BASE_PAYLOAD = [
    _usuario(1, "Leanne Graham", "Sincere@april.biz", "Romaguera-Crona", "Gwenborough"),
    _usuario(2, "Ervin Howell", "Shanna@melissa.tv", "ACME Industries", "Wisokyburgh"),
    _usuario(3, "Clementine Bauch", "Nathan@yesenia.net", "Romaguera-Jacobson", "McKenziehaven"),
    _usuario(4, "Patricia Lebsack", "Julianne.OConner@kory.org", "Robel-Corkery", "South Elvis"),
    _usuario(5, "Chelsey Dietrich", "Lucio_Hettinger@annie.ca", "Keebler LLC", "Roscoeview"),
    _usuario(6, "Mrs. Dennis Schulist", "Karley_Dach@jasper.info", "Considine-Lockman", "South Christy"),
    _usuario(7, "Kurtis Weissnat", "Telly.Hoeger@billy.biz", "Acme Labs", "Howemouth"),
    _usuario(8, "Nicholas Runolfsdottir V", "Sherwood@rosamond.me", "Abernathy Group", "Aliyaview"),
    _usuario(9, "Glenna Reichert", "Chaim_McDermott@dana.io", "Yost and Sons", "Bartholomebury"),
    _usuario(10, "Clementina DuBuque", "Rey.Padberg@karina.biz"),
]


class FakeAPIClient:
    """Cliente que devuelve un payload fijo o lanza la excepción indicada."""

    def __init__(self, payload=None, error=None):
        self.payload = BASE_PAYLOAD if payload is None else payload
        self.error = error
        self.calls = 0

    def obtener_usuarios(self):
        self.calls += 1
        if self.error is not None:
            raise self.error
        return list(self.payload)


@pytest.fixture
def base_payload():
    return [dict(item) for item in BASE_PAYLOAD]


@pytest.fixture
def api_client():
    return FakeAPIClient()


@pytest.fixture
def repository(api_client):
    return UserRepository(api_client)


@pytest.fixture
def coleccion(repository):
    return repository.obtener_usuarios()


@pytest.fixture
def controller():
    return DirectoryController()


@pytest.fixture
def loaded_controller(controller, coleccion):
    """Controlador con la colección de 50 usuarios ya cargada."""

    token = controller.iniciar_carga()
    controller.completar_carga(token, coleccion)
    return controller


@pytest.fixture
def make_api_client():
    return FakeAPIClient
