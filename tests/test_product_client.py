"""Unit tests for ProductClient (HTTP calls mocked)."""

from unittest.mock import MagicMock

import pytest
import requests

from catalog_service.services.product_client import ProductClient


def _response(status=200, payload=None):
    resp = MagicMock()
    resp.status_code = status
    resp.json.return_value = payload or {}
    if status >= 400:
        resp.raise_for_status.side_effect = requests.HTTPError(f"{status} error")
    return resp


@pytest.fixture
def product_client():
    client = ProductClient(base_url="http://catalog.test/", timeout=5)
    client.session = MagicMock()
    return client


@pytest.fixture(autouse=True)
def no_retry_wait(monkeypatch):
    monkeypatch.setattr("time.sleep", lambda seconds: None)


class TestProductClient:

    def test_list_products_with_filter(self, product_client):
        product_client.session.request.return_value = _response(payload={"estado": "OK", "data": []})

        result = product_client.list_products(stock_minimo=10)

        assert result["estado"] == "OK"
        product_client.session.request.assert_called_once_with(
            "GET", "http://catalog.test/productos", timeout=5, params={"stock_minimo": 10}
        )

    def test_create_product(self, product_client):
        product_client.session.request.return_value = _response(201, {"estado": "CREADO"})

        assert product_client.create_product({"nombre": "Mouse"})["estado"] == "CREADO"
        product_client.session.request.assert_called_once_with(
            "POST", "http://catalog.test/productos", timeout=5, json={"nombre": "Mouse"}
        )

    def test_update_quotes_id(self, product_client):
        product_client.session.request.return_value = _response(payload={"estado": "ACTUALIZADO"})

        product_client.update_product("a b", {"precio": 1})

        args, _ = product_client.session.request.call_args
        assert args == ("PUT", "http://catalog.test/productos/a%20b")

    @pytest.mark.parametrize("product_id", ["a/1", ""])
    def test_unroutable_id_is_rejected(self, product_client, product_id):
        with pytest.raises(ValueError):
            product_client.delete_product(product_id)

        product_client.session.request.assert_not_called()

    def test_http_error_is_not_retried(self, product_client):
        product_client.session.request.return_value = _response(404)

        with pytest.raises(requests.HTTPError):
            product_client.delete_product("zz")

        assert product_client.session.request.call_count == 1

    def test_connection_error_is_retried(self, product_client):
        product_client.session.request.side_effect = [
            requests.ConnectionError("down"),
            _response(payload={"estado": "ELIMINADO"}),
        ]

        assert product_client.delete_product("a1")["estado"] == "ELIMINADO"
        assert product_client.session.request.call_count == 2

    def test_gives_up_after_three_attempts(self, product_client):
        product_client.session.request.side_effect = requests.Timeout("slow")

        with pytest.raises(requests.Timeout):
            product_client.list_products()

        assert product_client.session.request.call_count == 3
