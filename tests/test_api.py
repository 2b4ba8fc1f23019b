"""
End‑to‑end tests of the JSON endpoints through FastAPI's TestClient.
"""

import pytest


def _register(client, nombre="Ana", email="ana@x.com", password="pw1"):
    return client.post(
        "/api/registro",
        json={"nombre": nombre, "email": email, "password": password},
    ).json()


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


class TestMembers:
    def test_register_and_login(self, client):
        assert _register(client) == {"success": True, "id": 1}

        response = client.post("/api/login", json={"email": "ana@x.com", "password": "pw1"})
        assert response.status_code == 200
        assert response.json() == {"success": True, "id": 1, "nombre": "Ana"}

    def test_register_duplicate_email(self, client):
        _register(client)
        body = _register(client, password="pw2")
        assert body == {"success": False, "message": "Ese correo ya está registrado"}

    def test_register_missing_field(self, client):
        response = client.post("/api/registro", json={"nombre": "Ana", "email": "ana@x.com"})
        assert response.status_code == 200
        assert response.json() == {"success": False, "message": "Faltan datos"}

    def test_register_without_body(self, client):
        response = client.post("/api/registro")
        assert response.status_code == 200
        assert response.json() == {"success": False, "message": "Faltan datos"}

    def test_login_missing_field(self, client):
        body = client.post("/api/login", json={"email": "ana@x.com"}).json()
        assert body == {"success": False, "message": "Faltan datos"}

    def test_login_unknown_email(self, client):
        body = client.post("/api/login", json={"email": "nadie@x.com", "password": "pw"}).json()
        assert body == {"success": False, "message": "Usuario no encontrado"}

    def test_login_wrong_password(self, client):
        _register(client)
        body = client.post("/api/login", json={"email": "ana@x.com", "password": "nope"}).json()
        assert body == {"success": False, "message": "Contraseña incorrecta"}

    def test_find_member_by_name(self, client):
        _register(client)
        assert client.get("/api/buscar-usuario/Ana").json() == {"exists": True, "id": 1, "nombre": "Ana"}
        assert client.get("/api/buscar-usuario/ana").json() == {"exists": False}

    def test_find_member_store_failure_means_not_found(self, client, app):
        with app.state.db.cursor() as cursor:
            cursor.execute("DROP TABLE comentarios_sobre_mi")
            cursor.execute("DROP TABLE comentarios")
            cursor.execute("DROP TABLE publicaciones")
            cursor.execute("DROP TABLE miembros")
        assert client.get("/api/buscar-usuario/Ana").json() == {"exists": False}

    def test_register_store_failure(self, client, app):
        with app.state.db.cursor() as cursor:
            cursor.execute("DROP TABLE comentarios_sobre_mi")
            cursor.execute("DROP TABLE comentarios")
            cursor.execute("DROP TABLE publicaciones")
            cursor.execute("DROP TABLE miembros")
        assert _register(client) == {"success": False, "message": "Error base datos"}
        body = client.post("/api/login", json={"email": "ana@x.com", "password": "pw1"}).json()
        assert body == {"success": False, "message": "Error BD"}


class TestPosts:
    def test_publish_and_list_newest_first(self, client):
        ana = _register(client)["id"]
        luis = _register(client, "Luis", "luis@x.com")["id"]

        first = client.post("/api/publicar", json={"usuario_id": ana, "contenido": "hola"}).json()
        second = client.post("/api/publicar", json={"usuario_id": luis, "contenido": "adiós"}).json()
        assert first == {"success": True, "id": 1}
        assert second == {"success": True, "id": 2}

        feed = client.get("/api/publicaciones").json()
        assert [p["id"] for p in feed] == [2, 1]
        assert set(feed[0]) == {"id", "contenido", "fecha", "nombre"}
        assert feed[0]["contenido"] == "adiós"
        assert feed[0]["nombre"] == "Luis"
        assert feed[1]["nombre"] == "Ana"

    @pytest.mark.parametrize(
        "payload",
        [{}, {"usuario_id": 1}, {"contenido": "hola"}, {"usuario_id": 1, "contenido": ""}],
    )
    def test_publish_missing_fields(self, client, payload):
        _register(client)
        assert client.post("/api/publicar", json=payload).json() == {"success": False}

    def test_publish_for_unknown_member(self, client):
        body = client.post("/api/publicar", json={"usuario_id": 99, "contenido": "x"}).json()
        assert body == {"success": False}

    def test_publish_with_non_numeric_member_id(self, client):
        body = client.post("/api/publicar", json={"usuario_id": "abc", "contenido": "x"}).json()
        assert body == {"success": False}

    def test_publish_with_id_beyond_sqlite_integer_range(self, client):
        response = client.post("/api/publicar", json={"usuario_id": 10**20, "contenido": "x"})
        assert response.status_code == 200
        assert response.json() == {"success": False}

    def test_publish_numeric_content_is_stored_as_text(self, client):
        ana = _register(client)["id"]
        body = client.post("/api/publicar", json={"usuario_id": ana, "contenido": 123}).json()
        assert body == {"success": True, "id": 1}
        assert client.get("/api/publicaciones").json()[0]["contenido"] == "123"

    def test_list_degrades_to_empty_on_store_failure(self, client, app):
        ana = _register(client)["id"]
        client.post("/api/publicar", json={"usuario_id": ana, "contenido": "hola"})
        with app.state.db.cursor() as cursor:
            cursor.execute("DROP TABLE comentarios")
            cursor.execute("DROP TABLE publicaciones")
        response = client.get("/api/publicaciones")
        assert response.status_code == 200
        assert response.json() == []


class TestComments:
    def _setup(self, client):
        ana = _register(client)["id"]
        post = client.post("/api/publicar", json={"usuario_id": ana, "contenido": "hola"}).json()["id"]
        other = client.post("/api/publicar", json={"usuario_id": ana, "contenido": "otro"}).json()["id"]
        return ana, post, other

    def test_comment_and_list_by_post(self, client):
        ana, post, other = self._setup(client)
        c1 = client.post(
            "/api/comentar",
            json={"usuario_id": ana, "publicacion_id": post, "comentario": "primero"},
        ).json()
        client.post(
            "/api/comentar",
            json={"usuario_id": ana, "publicacion_id": other, "comentario": "ajeno"},
        )
        c3 = client.post(
            "/api/comentar",
            json={"usuario_id": ana, "publicacion_id": post, "comentario": "segundo"},
        ).json()
        assert c1["success"] and c3["success"]

        listed = client.get(f"/api/comentarios/{post}").json()
        assert [c["id"] for c in listed] == [c3["id"], c1["id"]]
        assert [c["comentario"] for c in listed] == ["segundo", "primero"]
        assert set(listed[0]) == {"id", "comentario", "fecha", "nombre"}
        assert listed[0]["nombre"] == "Ana"

    def test_comment_missing_fields(self, client):
        ana, post, _ = self._setup(client)
        body = client.post("/api/comentar", json={"usuario_id": ana, "publicacion_id": post}).json()
        assert body == {"success": False}

    def test_comment_on_missing_post(self, client):
        ana, _, _ = self._setup(client)
        body = client.post(
            "/api/comentar",
            json={"usuario_id": ana, "publicacion_id": 500, "comentario": "x"},
        ).json()
        assert body == {"success": False}

    def test_comments_of_post_without_comments(self, client):
        _, post, _ = self._setup(client)
        assert client.get(f"/api/comentarios/{post}").json() == []
        assert client.get("/api/comentarios/987").json() == []

    def test_comments_with_non_numeric_post_id(self, client):
        response = client.get("/api/comentarios/abc")
        assert response.status_code == 200
        assert response.json() == []

    def test_profile_comments_are_listed_system_wide(self, client):
        ana = _register(client)["id"]
        luis = _register(client, "Luis", "luis@x.com")["id"]
        first = client.post("/api/comentario-sobre-mi", json={"usuario_id": ana, "comentario": "soy Ana"}).json()
        second = client.post("/api/comentario-sobre-mi", json={"usuario_id": luis, "comentario": "soy Luis"}).json()
        assert first == {"success": True, "id": 1}
        assert second == {"success": True, "id": 2}

        listed = client.get("/api/comentarios-sobre-mi").json()
        assert [c["nombre"] for c in listed] == ["Luis", "Ana"]
        assert [c["comentario"] for c in listed] == ["soy Luis", "soy Ana"]

    def test_profile_comment_missing_fields(self, client):
        body = client.post("/api/comentario-sobre-mi", json={"comentario": "x"}).json()
        assert body == {"success": False}

    def test_comment_lists_degrade_to_empty_on_store_failure(self, client, app):
        with app.state.db.cursor() as cursor:
            cursor.execute("DROP TABLE comentarios")
            cursor.execute("DROP TABLE comentarios_sobre_mi")
        assert client.get("/api/comentarios/1").json() == []
        assert client.get("/api/comentarios-sobre-mi").json() == []

    def test_comment_lists_with_id_beyond_sqlite_integer_range(self, client):
        response = client.get("/api/comentarios/100000000000000000000")
        assert response.status_code == 200
        assert response.json() == []

    def test_comment_with_ids_beyond_sqlite_integer_range(self, client):
        ana, post, _ = self._setup(client)
        huge = 10**20
        for payload in (
            {"usuario_id": huge, "publicacion_id": post, "comentario": "x"},
            {"usuario_id": ana, "publicacion_id": huge, "comentario": "x"},
        ):
            response = client.post("/api/comentar", json=payload)
            assert response.status_code == 200
            assert response.json() == {"success": False}
        response = client.post("/api/comentario-sobre-mi", json={"usuario_id": huge, "comentario": "x"})
        assert response.json() == {"success": False}

    def test_numeric_comment_text_is_stored_as_text(self, client):
        ana, post, _ = self._setup(client)
        body = client.post(
            "/api/comentar",
            json={"usuario_id": ana, "publicacion_id": post, "comentario": 42},
        ).json()
        assert body["success"] is True
        assert client.get(f"/api/comentarios/{post}").json()[0]["comentario"] == "42"

        body = client.post("/api/comentario-sobre-mi", json={"usuario_id": ana, "comentario": 7.5}).json()
        assert body["success"] is True
        assert client.get("/api/comentarios-sobre-mi").json()[0]["comentario"] == "7.5"

    def test_malformed_comment_body_has_no_message(self, client):
        body = client.post("/api/comentar", json={"usuario_id": "abc", "comentario": "x"}).json()
        assert body == {"success": False}
        body = client.post("/api/comentario-sobre-mi", json={"usuario_id": 1, "comentario": True}).json()
        assert body == {"success": False}

    def test_malformed_login_body_keeps_message(self, client):
        body = client.post("/api/login", json={"email": ["a"], "password": "pw"}).json()
        assert body == {"success": False, "message": "Faltan datos"}
