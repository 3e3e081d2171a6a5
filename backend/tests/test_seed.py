from app.core.constants import DEFAULT_METRICS
from app.models.progress import Progress
from scripts.seed_progress import seed_default_metrics


def test_seed_inserts_defaults_once(db):
    assert seed_default_metrics(db) == len(DEFAULT_METRICS)
    assert seed_default_metrics(db) == 0

    rows = {p.name: p for p in db.query(Progress).all()}
    assert set(rows) == {"JSM", "GFE", "FEM"}
    assert rows["GFE"].target == 574
    assert rows["FEM"].unit == "hours"
