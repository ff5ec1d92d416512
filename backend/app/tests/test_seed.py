"""
Tests for the demo seed data.
"""
from app.db.seed import seed, DEMO_EMAIL, DEMO_PASSWORD
from app.models import Transaction


def test_seed_replaces_existing_data(client, db, user):
    seeded = seed(db)
    assert seeded.email == DEMO_EMAIL
    assert db.query(Transaction).filter(Transaction.owner_id == seeded.id).count() == 5
    
    response = client.post("/api/auth/login", json={"email": DEMO_EMAIL, "password": DEMO_PASSWORD})
    assert response.status_code == 200
    headers = {"Authorization": f"Bearer {response.json()['token']}"}
    summary = client.get("/api/transactions/summary", headers=headers).json()
    assert summary["labels"] == ["Jan 20", "Feb 1", "Feb 5", "Feb 10", "Feb 15"]
    assert summary["datasets"][0]["data"] == [120.5, 1500, 200, 0, 0]
    assert summary["datasets"][1]["data"] == [0, 0, 0, 500, 3000]
