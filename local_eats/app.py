from __future__ import annotations

import io
import logging

from fastapi import Depends, FastAPI, HTTPException, Request
from pydantic import BaseModel
from starlette.middleware.sessions import SessionMiddleware

from .auth.config import DEFAULT_AUTH_CONFIG
from .auth.dependencies import get_current_user, require_admin
from .auth.users import authenticate
from .data_ingestion.ingest import parse_restaurant_csv
from .filters.engine import apply_filters, has_active_filters, reduce_filters
from .filters.facets import build_city_cuisine_map, build_city_neighborhood_map, extract_facets
from .filters.models import FacetOptions, FilterResult, FilterState, ReduceRequest
from .lookups.cache import address_cache, clear_cache, get_cache_stats
from .lookups.places import batch_lookup_price_ranges, lookup_address
from .restaurants.data_store import get_groups, get_repository, load_restaurants
from .restaurants.grouper import flatten_groups
from .restaurants.models import (
    LoginRequest,
    RestaurantGroup,
    RestaurantsResponse,
    UploadRequest,
    UploadResponse,
)
from .support import inbox
from .support.models import InboxResponse, MessageStatus, SupportMessage, SupportMessageIn

logger = logging.getLogger(__name__)

app = FastAPI(title="Local Eats & Treats API", version="1.0.0")
app.add_middleware(SessionMiddleware, secret_key=DEFAULT_AUTH_CONFIG.session_secret)


class AddressLookupRequest(BaseModel):
    name: str
    city: str = ""
    neighborhood: str = ""


# ── Public endpoints ─────────────────────────────────────────────────────


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/restaurants", response_model=RestaurantsResponse)
def restaurants() -> RestaurantsResponse:
    dataset = load_restaurants()
    return RestaurantsResponse(
        restaurants=dataset.restaurants,
        updated_at=dataset.updated_at,
        count=len(dataset.restaurants),
        source=dataset.source,
    )


@app.get("/restaurants/groups", response_model=list[RestaurantGroup])
def restaurant_groups() -> list[RestaurantGroup]:
    return get_groups()


# ── Filters ──────────────────────────────────────────────────────────────


@app.post("/filters/options", response_model=FacetOptions)
def filter_options(state: FilterState) -> FacetOptions:
    return extract_facets(get_groups(), state)


@app.post("/filters/apply", response_model=FilterResult)
def filter_apply(state: FilterState) -> FilterResult:
    groups = get_groups()
    filtered = apply_filters(groups, state)
    return FilterResult(
        groups=filtered,
        filtered_count=len(filtered),
        total_count=len(groups),
        has_active_filters=has_active_filters(state),
    )


@app.get("/filters/city-map")
def filter_city_map() -> dict[str, dict[str, list[str]]]:
    records = flatten_groups(get_groups())
    return {
        "neighborhoods": build_city_neighborhood_map(records),
        "cuisines": build_city_cuisine_map(records),
    }


@app.post("/filters/reduce", response_model=FilterState)
def filter_reduce(body: ReduceRequest) -> FilterState:
    try:
        return reduce_filters(get_groups(), body.state, body.action)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc


# ── Support ──────────────────────────────────────────────────────────────


@app.post("/support/messages", response_model=SupportMessage)
def support_submit(body: SupportMessageIn) -> SupportMessage:
    return inbox.submit_message(body.name, body.email, body.message)


# ── Address lookup ───────────────────────────────────────────────────────


@app.post("/address/lookup")
def address_lookup(body: AddressLookupRequest) -> dict:
    if not body.name.strip():
        raise HTTPException(status_code=400, detail="Restaurant name is required")
    return lookup_address(body.name, body.city, body.neighborhood)


# ── Auth endpoints ───────────────────────────────────────────────────────


@app.post("/auth/login")
def login(body: LoginRequest, request: Request) -> dict:
    user = authenticate(body.username, body.password)
    if not user:
        raise HTTPException(status_code=401, detail="Invalid credentials")
    request.session["user"] = user
    return {"status": "ok", "user": user}


@app.post("/auth/logout")
def logout(request: Request) -> dict:
    request.session.clear()
    return {"status": "logged_out"}


@app.get("/auth/me")
def auth_me(user: dict | None = Depends(get_current_user)) -> dict:
    if not user:
        raise HTTPException(status_code=401, detail="Not authenticated")
    return user


# ── Admin endpoints ──────────────────────────────────────────────────────


@app.post("/restaurants/upload", response_model=UploadResponse)
def upload_restaurants(
    body: UploadRequest,
    user: dict = Depends(require_admin),
) -> UploadResponse:
    try:
        stored = get_repository().save(body.restaurants)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    logger.info("Admin %s uploaded %d restaurants", user["username"], stored.count)
    return UploadResponse(
        status="success",
        message=f"Successfully uploaded {stored.count} restaurants",
        count=stored.count,
        updated_at=stored.updated_at,
    )


@app.post("/restaurants/upload-csv", response_model=UploadResponse)
async def upload_restaurants_csv(
    request: Request,
    user: dict = Depends(require_admin),
) -> UploadResponse:
    body = await request.body()
    try:
        records = parse_restaurant_csv(io.StringIO(body.decode("utf-8")))
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=f"CSV parsing error: {exc}") from exc
    return upload_restaurants(UploadRequest(restaurants=records), user)


@app.delete("/restaurants")
def clear_restaurants(user: dict = Depends(require_admin)) -> dict:
    get_repository().clear()
    return {"status": "cleared"}


@app.post("/restaurants/prices/lookup")
def lookup_prices(user: dict = Depends(require_admin)) -> dict:
    results = batch_lookup_price_ranges(load_restaurants().restaurants)
    return {
        "results": results,
        "count": len(results),
        "found": sum(1 for r in results if r["status"] == "found"),
    }


@app.get("/support/messages", response_model=InboxResponse)
def support_inbox(
    status: MessageStatus = MessageStatus.all,
    user: dict = Depends(require_admin),
) -> InboxResponse:
    return InboxResponse(
        messages=inbox.list_messages(status),
        total=len(inbox.list_messages()),
        unread=inbox.unread_count(),
    )


@app.post("/support/messages/{message_id}/read", response_model=SupportMessage)
def support_mark_read(message_id: str, user: dict = Depends(require_admin)) -> SupportMessage:
    try:
        return inbox.mark_read(message_id)
    except KeyError:
        raise HTTPException(status_code=404, detail="Message not found")


@app.post("/support/messages/{message_id}/unread", response_model=SupportMessage)
def support_mark_unread(message_id: str, user: dict = Depends(require_admin)) -> SupportMessage:
    try:
        return inbox.mark_unread(message_id)
    except KeyError:
        raise HTTPException(status_code=404, detail="Message not found")


@app.delete("/support/messages/{message_id}")
def support_delete(message_id: str, user: dict = Depends(require_admin)) -> dict:
    try:
        inbox.delete_message(message_id)
    except KeyError:
        raise HTTPException(status_code=404, detail="Message not found")
    return {"status": "deleted"}


@app.delete("/support/messages")
def support_delete_all(user: dict = Depends(require_admin)) -> dict:
    return {"status": "deleted", "count": inbox.delete_all_messages()}


@app.get("/address/cache")
def address_cache_view(user: dict = Depends(require_admin)) -> dict:
    return {"entries": address_cache.entries(), "stats": get_cache_stats()}


@app.delete("/address/cache")
def address_cache_clear(user: dict = Depends(require_admin)) -> dict:
    clear_cache()
    return {"status": "cleared"}
