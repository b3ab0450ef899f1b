from collections.abc import Sequence

from sqlmodel import Session, col, select

from .table import SliderTable


class SliderRepository:
    """Data-access layer for sliders."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def get(self, slider_id: str) -> SliderTable | None:
        return self._session.get(SliderTable, slider_id)

    def list_all(self) -> Sequence[SliderTable]:
        statement = select(SliderTable).order_by(
            col(SliderTable.position).asc(), col(SliderTable.created_at).asc()
        )
        return self._session.exec(statement).all()

    def add(self, slider: SliderTable) -> SliderTable:
        self._session.add(slider)
        return slider

    def delete(self, slider: SliderTable) -> None:
        self._session.delete(slider)
