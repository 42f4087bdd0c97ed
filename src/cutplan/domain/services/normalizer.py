"""Input validation and expansion of cut rows into individual pieces."""

from __future__ import annotations

import logging
import math
from typing import Sequence

from cutplan.domain.exceptions import ValidationError
from cutplan.domain.value_objects import CutRow, Piece, StockSpec

logger = logging.getLogger(__name__)


def validate_stock(stock: StockSpec) -> None:
    """Check that the stock can be cut at all.

    Raises:
        ValidationError: If the bar length or bar count is not positive.
    """
    if not math.isfinite(stock.bar_length) or stock.bar_length <= 0:
        raise ValidationError(
            f"Stock bar length must be a positive number (got {stock.bar_length!r})",
            field="stock.length",
        )
    if stock.bar_count <= 0:
        raise ValidationError(
            f"Stock quantity must be at least 1 (got {stock.bar_count!r})",
            field="stock.quantity",
        )


def normalize(
    stock: StockSpec,
    rows: Sequence[CutRow],
    max_rows: int | None = None,
    max_pieces: int | None = None,
) -> list[Piece]:
    """Validate input and explode cut rows into the pending pool.

    Rows with a non-positive quantity or length are skipped. Each
    remaining row contributes ``quantity`` independent pieces. The pool
    is sorted by length, longest first; ties keep row order.

    Args:
        stock: Stock candidate to validate.
        rows: Raw cut rows in input order.
        max_rows: Optional limit on the number of cut rows.
        max_pieces: Optional limit on the number of pieces, checked before
            any piece is created.

    Returns:
        The pending pool of pieces.

    Raises:
        ValidationError: If the stock is invalid, a row holds a non-finite
            length, there are too many rows or pieces, or no piece results.
    """
    validate_stock(stock)

    if max_rows is not None and len(rows) > max_rows:
        raise ValidationError(
            f"At most {max_rows} cut rows are allowed (got {len(rows)})",
            field="cuts",
        )

    piece_count = 0
    pool: list[Piece] = []
    for index, row in enumerate(rows):
        if not math.isfinite(row.length):
            raise ValidationError(
                f"Cut length must be a finite number (got {row.length!r})",
                field=f"cuts[{index}].length",
            )
        if row.quantity <= 0 or row.length <= 0:
            logger.debug("Skipping cut row %d: quantity=%s length=%s",
                         index, row.quantity, row.length)
            continue
        piece_count += row.quantity
        if max_pieces is not None and piece_count > max_pieces:
            raise ValidationError(
                f"At most {max_pieces} pieces are allowed (got at least {piece_count})",
                field="cuts",
            )
        pool.extend(Piece(length=row.length, label=row.label) for _ in range(row.quantity))

    if not pool:
        raise ValidationError(
            "At least one cut with positive quantity and length is required",
            field="cuts",
        )

    # sorted() is stable, so equal lengths keep their input order
    pool = sorted(pool, key=lambda p: p.length, reverse=True)
    logger.debug("Normalized %d rows into %d pieces", len(rows), len(pool))
    return pool
