import logging
from collections.abc import Mapping

from pydantic import BaseModel

from utils.errors import NotFoundError, ValidationError

logger = logging.getLogger(__name__)

# -----------------------------
# UPDATABLE FIELDS PER ENTITY
# -----------------------------

UPDATE_FIELDS = {
    "user": (
        "fullName", "contactNumber", "email", "location", "profilePic",
        "wallet", "status", "onDuty",
    ),
    "product": (
        "name", "images", "price", "offer", "qty", "description",
        "features", "otherNames", "life", "rating", "status",
    ),
    "order": (
        "customerName", "contact", "email", "location", "items",
        "totalCost", "offer", "discount", "finalCost", "orderRating",
        "deliveryRating", "vendorRating", "status", "comment",
        "paymentStatus", "paymentType", "timeDelivered", "deliveryBoy",
        "did", "vid", "vendor", "vendorName",
    ),
    "cart": ("items", "totalCost", "offer", "discount"),
    "saved": ("items",),
}


def _present_fields(update) -> dict:
    if isinstance(update, BaseModel):
        # only what the caller actually sent
        return update.model_dump(exclude_unset=True, exclude_none=True)
    if isinstance(update, Mapping):
        return {k: v for k, v in update.items() if v is not None}
    raise TypeError(f"Unsupported update type: {type(update).__name__}")


def record_id_of(update) -> str:
    record_id = _present_fields(update).get("id")
    if not record_id:
        raise ValidationError('"id" is required', field="id")
    return record_id


def build_patch(kind: str, update) -> tuple[str, dict]:
    """
    Split an update request into the target id and a merge patch.
    The patch holds only allow-listed fields that are present in the update.
    """
    record_id = record_id_of(update)
    fields = _present_fields(update)

    allowed = UPDATE_FIELDS[kind]
    patch = {field: fields[field] for field in allowed if field in fields}

    return record_id, patch


async def apply_update(store, collection: str, kind: str, update, missing_message: str) -> dict:
    existing = await store.get(collection, record_id_of(update))
    if not existing:
        raise NotFoundError(missing_message)

    record_id, patch = build_patch(kind, update)
    logger.debug("MERGE_UPDATE collection=%s id=%s fields=%s", collection, record_id, sorted(patch))

    await store.set(collection, record_id, patch, merge=True)
    return patch
