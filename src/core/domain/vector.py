"""
Vector3 — 3D вектор с семантикой значения

Immutable Pydantic модель (frozen=True). Нет владения ресурсами:
экземпляры свободно копируются и передаются, операции VectorEngine
(src.core.math.vector_ops) всегда возвращают новый экземпляр и никогда
не изменяют аргументы.
"""

from pydantic import BaseModel, Field


class Vector3(BaseModel):
    """Вектор из трёх компонент (x, y, z)."""

    x: float = Field(0.0, description="Компонента X")
    y: float = Field(0.0, description="Компонента Y")
    z: float = Field(0.0, description="Компонента Z")

    model_config = {"frozen": True}  # Immutable

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)
