# pelabuhan-api

A small HTTP API server for countries (*negara*), ports (*pelabuhan*) and
goods (*barang*). It gets its data from an upstream API, drops incomplete
records, cleans up the text fields and returns the result as JSON.

## Installation

```
pip install .
```

## Running

```
pelabuhan-api
```

The command takes no options. It reads its settings from the environment;
a `.env` file in the working directory is loaded first if one is present.

| Variable           | Default                        | Meaning                                        |
|--------------------|--------------------------------|------------------------------------------------|
| `PORT`             | `8080`                         | Port to listen on, on all interfaces           |
| `EXTERNAL_API_URL` | `http://localhost:8080/api/v1` | Base URL of the upstream API                   |
| `GIN_MODE`         | `debug`                        | Any value other than `debug` turns debug off   |

If `PORT` is not a whole number, or the server cannot bind to it, the command
logs the failure and exits with status 1.

The server is Flask's built-in server; the package does not bundle a
production WSGI server. To use one, serve the application returned by
`pelabuhan_api.app.create_app()`.

## Endpoints

| Method | Path                                   | Description                          |
|--------|----------------------------------------|--------------------------------------|
| GET    | `/`                                    | Server info and a list of endpoints  |
| GET    | `/health`                              | Health check                         |
| GET    | `/api/v1/negaras`                      | All countries                        |
| GET    | `/api/v1/pelabuhans?id_negara={id}`    | Ports of one country                 |
| GET    | `/api/v1/barangs?id_pelabuhan={id}`    | Goods handled at one port            |

A successful response has this shape:

```json
{"status": "success", "message": "Countries data retrieved successfully", "data": [...]}
```

When nothing is found, `data` is an empty list and the message says so.

When a query parameter is missing or blank, or `id_pelabuhan` is not an
integer, the server answers `400`. When the upstream API fails, it answers
`500` with an `error` field that describes the failure.

`OPTIONS` requests get an empty `204` answer. Requests from
`http://localhost:3000`, `http://127.0.0.1:3000`, `http://localhost:3001` and
`http://127.0.0.1:3001` get `Access-Control-Allow-Origin` set to their origin;
requests with no `Origin` header get `*`.

## Using it as a library

```python
from pelabuhan_api.app import create_app
from pelabuhan_api.controller import Controller
from pelabuhan_api.service import HttpExternalService

service = HttpExternalService.from_env()
app = create_app(Controller(service))
app.run(port=8080)
```

`create_app()` with no argument builds the controller from the environment.

`HttpExternalService` accepts either a bare JSON array from the upstream API or
a wrapped `{"status": "success", "data": [...]}` object, and raises
`ExternalServiceError` when the request fails, the upstream answers with a
status other than 200, or the body cannot be decoded. Any other data source
can be plugged in by subclassing `ExternalService`.

The helpers `validate_negaras`, `validate_pelabuhans` and `validate_barangs`
in `pelabuhan_api.service` do the filtering and cleanup. The records are the
dataclasses `Negara`, `Pelabuhan` and `Barang` in `pelabuhan_api.models`, each
with `from_dict` and `to_dict`.

## Tests

```
pip install ".[test]"
pytest
```