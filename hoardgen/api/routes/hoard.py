"""Treasure hoard API endpoints."""

from fastapi import APIRouter, HTTPException

from hoardgen.core.errors import (
    HoardError,
    InvalidFormula,
    MalformedTableText,
    PackNotFound,
    TableNotFound,
    UnsupportedItemType,
)
from hoardgen.dice.roller import DiceResult
from hoardgen.hoard.assembler import get_assembler
from hoardgen.hoard.models import (
    HoardGenerateRequest,
    HoardGenerateResponse,
    RollRequest,
)
from hoardgen.hoard.store import InMemoryHoardStore

router = APIRouter()


def _status_for(error: HoardError) -> int:
    if isinstance(error, (InvalidFormula, UnsupportedItemType)):
        return 400
    if isinstance(error, (PackNotFound, TableNotFound)):
        return 404
    if isinstance(error, MalformedTableText):
        return 422
    if type(error) is HoardError:
        return 400
    return 500


def get_hoard_store() -> InMemoryHoardStore:
    store = get_assembler().store
    if not isinstance(store, InMemoryHoardStore):
        raise HTTPException(status_code=501, detail="Hoard store cannot be browsed")
    return store


@router.post("/hoard/generate", response_model=HoardGenerateResponse)
async def generate_hoard(request: HoardGenerateRequest):
    """Generate a treasure hoard from a category -> quantity formula mapping."""
    try:
        hoard = await get_assembler().build_and_notify(request.name, request.configuration)
    except HoardError as e:
        raise HTTPException(status_code=_status_for(e), detail=e.message)
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))

    return HoardGenerateResponse(
        container_id=hoard.container_id,
        name=hoard.name,
        items=hoard.items,
        item_count=len(hoard.items),
        total_value=hoard.total_value,
    )


@router.get("/hoard/{container_id}")
async def get_hoard(container_id: str):
    """Get a generated hoard with its items."""
    hoard = get_hoard_store().get_hoard(container_id)
    if not hoard:
        raise HTTPException(status_code=404, detail="Hoard not found")
    return hoard.model_dump()


@router.get("/hoards")
async def list_hoards(limit: int = 50):
    """List generated hoards without their items."""
    hoards = get_hoard_store().list_hoards(limit=limit)
    return {
        "hoards": [
            {
                "container_id": h.container_id,
                "name": h.name,
                "item_count": len(h.items),
                "total_value": sum(i.cost for i in h.items),
            }
            for h in hoards
        ],
        "count": len(hoards),
    }


@router.post("/hoard/roll", response_model=DiceResult)
async def roll_formula(request: RollRequest):
    """Evaluate a quantity roll formula such as "3d6" or "95+1d10"."""
    try:
        return get_assembler().roller.roll(request.formula)
    except InvalidFormula as e:
        raise HTTPException(status_code=400, detail=e.message)
