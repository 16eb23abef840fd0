# reset_db.py

from app import create_app
from extensions import get_gateway

app = create_app()

with app.app_context():
    gateway = get_gateway()
    with open(app.config["SCHEMA_FILE"], encoding="utf-8") as f:
        ddl = f.read()

    print(f"⚠️ Всі довідники в БД '{gateway.default_database}' будуть видалені...")
    gateway.query(ddl)
    print("✅ Таблиці, процедури та функції створено заново.")

    for name in gateway.routines.functions:
        rows = gateway.call_function(name)
        print(f"- {name}: {len(rows)} rows")

    gateway.dispose()
