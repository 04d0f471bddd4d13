"""
Employee Service package.

A façade over the upstream employee-record service. It owns no state:
every read is fetched fresh from upstream and derived aggregations run in
memory over that fetch.

Structure:
- app.main: FastAPI app, routes, and error mapping.
- app.models: Employee, create request and upstream response envelopes.
- app.adapters: the upstream gateway client (retry + error translation).
- app.domain: pure aggregations over fetched employees.
"""
