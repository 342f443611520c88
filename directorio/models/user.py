"""Definiciones de modelos de dominio."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from directorio.core.errors import ParseError


@dataclass(frozen=True, slots=True)
class Company:
    name: str = ""


@dataclass(frozen=True, slots=True)
class Address:
    city: str = ""


@dataclass(frozen=True, slots=True)
class User:
    """Registro de usuario tal como lo consume el directorio.

    Attributes
    ----------
    id:
        Identificador único dentro de la colección.
    name, email:
        Datos obligatorios del usuario.
    company, address:
        Pueden faltar en la respuesta del servicio. Se exponen como ``None``
        y las propiedades ``company_name`` y ``city`` devuelven ``""`` en ese
        caso.
    """

    id: int
    name: str
    email: str
    company: Company | None = None
    address: Address | None = None

    @property
    def company_name(self) -> str:
        return self.company.name if self.company else ""

    @property
    def city(self) -> str:
        return self.address.city if self.address else ""

    @classmethod
    def from_payload(cls, datos: Any) -> "User":
        """Construye un usuario a partir de un elemento del JSON remoto.

        Los campos adicionales se ignoran. Lanza :class:`ParseError` si el
        elemento no tiene la forma esperada.
        """

        if not isinstance(datos, Mapping):
            raise ParseError(f"Se esperaba un objeto de usuario, se recibió {type(datos).__name__}.")

        user_id = datos.get("id")
        if isinstance(user_id, bool) or not isinstance(user_id, int):
            raise ParseError(f"Identificador de usuario inválido: {user_id!r}.")

        name = datos.get("name")
        email = datos.get("email")
        if not isinstance(name, str) or not isinstance(email, str):
            raise ParseError(f"El usuario {user_id} no tiene nombre o email válidos.")

        return cls(
            id=user_id,
            name=name,
            email=email,
            company=_parse_company(datos.get("company")),
            address=_parse_address(datos.get("address")),
        )


def _parse_company(valor: Any) -> Company | None:
    if valor is None:
        return None
    if not isinstance(valor, Mapping):
        raise ParseError("El campo 'company' debe ser un objeto.")
    return Company(name=_texto_opcional(valor.get("name")))


def _parse_address(valor: Any) -> Address | None:
    if valor is None:
        return None
    if not isinstance(valor, Mapping):
        raise ParseError("El campo 'address' debe ser un objeto.")
    return Address(city=_texto_opcional(valor.get("city")))


def _texto_opcional(valor: Any) -> str:
    return valor if isinstance(valor, str) else ""


__all__ = ["Address", "Company", "User"]
