from pymongo import ASCENDING
from pymongo.errors import OperationFailure

from config.constants import CARTS, CATEGORIES, OFFERS, ORDERS, PRODUCTS, SAVED, USERS


def _normalize_key_pairs(keys):
    return [(k, v) for k, v in keys]


async def _create_index_safe(collection, keys, **kwargs):
    """
    Create index safely.
    If Mongo reports IndexOptionsConflict/IndexKeySpecsConflict for same key pattern,
    drop the conflicting index and recreate with desired options.
    """
    desired_key = _normalize_key_pairs(keys)
    desired_name = kwargs.get("name")
    try:
        await collection.create_index(keys, **kwargs)
        return
    except OperationFailure as e:
        if getattr(e, "code", None) not in {85, 86}:
            raise

        conflicting_names = []
        async for idx in collection.list_indexes():
            idx_key = _normalize_key_pairs(list(idx.get("key", {}).items()))
            if idx_key == desired_key:
                idx_name = idx.get("name")
                if idx_name and idx_name != desired_name:
                    conflicting_names.append(idx_name)

        for idx_name in conflicting_names:
            await collection.drop_index(idx_name)

        await collection.create_index(keys, **kwargs)


async def ensure_indexes(db):
    # Accounts
    # duplicate emails are rejected by a read-then-write check, not by the index
    await _create_index_safe(
        db[USERS],
        [("email", ASCENDING)],
        name="userx_email_idx",
    )
    await _create_index_safe(
        db[USERS],
        [("fullName", ASCENDING)],
        name="userx_full_name_idx",
    )

    # Products
    await _create_index_safe(
        db[PRODUCTS],
        [("name", ASCENDING), ("vid", ASCENDING), ("manufacturer", ASCENDING)],
        name="products_name_vid_manufacturer_idx",
    )
    await _create_index_safe(
        db[PRODUCTS],
        [("keywords", ASCENDING)],
        name="products_keywords_idx",
    )

    # Catalog
    await _create_index_safe(
        db[CATEGORIES],
        [("name", ASCENDING)],
        name="categories_name_idx",
    )
    await _create_index_safe(
        db[OFFERS],
        [("name", ASCENDING), ("code", ASCENDING)],
        name="offers_name_code_idx",
    )

    # Orders
    await _create_index_safe(
        db[ORDERS],
        [("createdAt", ASCENDING)],
        name="orders_created_at_idx",
    )
    await _create_index_safe(
        db[ORDERS],
        [("keywords", ASCENDING)],
        name="orders_keywords_idx",
    )
    await _create_index_safe(
        db[ORDERS],
        [("cid", ASCENDING), ("createdAt", ASCENDING)],
        name="orders_cid_created_at_idx",
    )

    # Per-customer lists
    await _create_index_safe(
        db[CARTS],
        [("cid", ASCENDING)],
        name="carts_cid_idx",
    )
    await _create_index_safe(
        db[SAVED],
        [("cid", ASCENDING)],
        name="saved_cid_idx",
    )
