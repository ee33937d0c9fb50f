"""
Scénarios de bout en bout sur l'API élèves, avec une vraie base SQLite en mémoire.
Router → service → repository → base, sans mock.
"""


def create(client, name, age, email, **extra):
    resp = client.post("/api/v1/students", json={"name": name, "age": age, "email": email, **extra})
    assert resp.status_code == 201
    return resp.json()


def test_creation_puis_suppression_logique(sqlite_client):
    """Créer Ana Lee, la supprimer : elle disparaît de toutes les lectures."""
    ana = create(sqlite_client, "Ana Lee", 20, "ana@x.com")
    assert ana["active"] is True
    assert ana["deleted"] is False
    assert ana["created_at"] == ana["updated_at"]

    resp = sqlite_client.delete(f"/api/v1/students/{ana['id']}")
    assert resp.status_code == 200
    assert resp.json() == {"success": True}

    assert sqlite_client.get(f"/api/v1/students/{ana['id']}").status_code == 404
    assert sqlite_client.get("/api/v1/students/active").json() == []
    assert sqlite_client.get("/api/v1/students").json() == []
    assert sqlite_client.put(f"/api/v1/students/{ana['id']}", json={"age": 30}).status_code == 404


def test_suppression_idempotente(sqlite_client):
    """Une seconde suppression du même id réussit encore (correspondance sur l'id seul)."""
    ana = create(sqlite_client, "Ana Lee", 20, "ana@x.com")

    assert sqlite_client.delete(f"/api/v1/students/{ana['id']}").status_code == 200
    assert sqlite_client.delete(f"/api/v1/students/{ana['id']}").status_code == 200
    assert sqlite_client.delete("/api/v1/students/9999").status_code == 404


def test_filtre_age(sqlite_client):
    """Deux élèves (20 et 30 ans) : age=20 ne retourne que le premier."""
    vingt = create(sqlite_client, "Ana Lee", 20, "ana@x.com")
    create(sqlite_client, "Jean Dupont", 30, "jean@school.be")

    data = sqlite_client.get("/api/v1/students", params={"age": 20}).json()

    assert [s["id"] for s in data] == [vingt["id"]]


def test_filtres_combines_et_active_invalide(sqlite_client):
    ana = create(sqlite_client, "Ana Lee", 20, "ana@x.com")
    inactive = create(sqlite_client, "Diana Ross", 20, "diana@x.com", active=False)
    create(sqlite_client, "Jean Dupont", 20, "jean@school.be")

    strict = sqlite_client.get("/api/v1/students", params={"name": "ANA", "age": 20, "active": "1"}).json()
    assert [s["id"] for s in strict] == [ana["id"]]

    lenient = sqlite_client.get("/api/v1/students", params={"name": "ana", "active": "peut-etre"}).json()
    assert [s["id"] for s in lenient] == [ana["id"], inactive["id"]]


def test_mise_a_jour_partielle(sqlite_client):
    ana = create(sqlite_client, "Ana Lee", 20, "ana@x.com")

    resp = sqlite_client.put(f"/api/v1/students/{ana['id']}", json={"active": False})

    assert resp.status_code == 200
    data = resp.json()
    assert data["active"] is False
    assert data["name"] == "Ana Lee"
    assert data["age"] == 20
    assert data["email"] == "ana@x.com"
    assert sqlite_client.get("/api/v1/students/active").json() == []


def test_mise_a_jour_null_refusee(sqlite_client):
    """Un champ envoyé à null → 422, l'élève reste inchangé."""
    ana = create(sqlite_client, "Ana Lee", 20, "ana@x.com")

    for field in ("name", "age", "email", "active"):
        resp = sqlite_client.put(f"/api/v1/students/{ana['id']}", json={field: None})
        assert resp.status_code == 422

    stored = sqlite_client.get(f"/api/v1/students/{ana['id']}").json()
    assert stored["name"] == "Ana Lee"
    assert stored["age"] == 20
    assert stored["email"] == "ana@x.com"
    assert stored["active"] is True
