# invitation/progression.py
# =================================================================================
# 🧭 Controlador de progresión de secciones (modo paginado)
# - Lista ordenada y fija de secciones; se desbloquean de una en una.
# - `unlocked` siempre es un prefijo {0..k} y nunca se vuelve a bloquear.
# - Solo se puede navegar a secciones ya desbloqueadas.
# =================================================================================

from __future__ import annotations

from typing import Callable, List, Optional, Sequence, Set

from invitation.content import SECTIONS, SectionDescriptor


class SectionProgression:
    def __init__(
        self,
        sections: Sequence[SectionDescriptor] = SECTIONS,
        on_move: Optional[Callable[[int], None]] = None,
    ) -> None:
        if not sections:
            raise ValueError("Se necesita al menos una sección")
        self.sections: List[SectionDescriptor] = list(sections)
        self.unlocked: Set[int] = {0}
        self.current = 0
        self._on_move = on_move            # Efecto secundario (scroll al inicio) tras moverse.

    @property
    def current_section(self) -> SectionDescriptor:
        return self.sections[self.current]

    @property
    def is_last(self) -> bool:
        return self.current == len(self.sections) - 1

    @property
    def can_advance(self) -> bool:
        return self.current + 1 < len(self.sections)

    def advance(self) -> bool:
        """Desbloquea y abre la siguiente sección; en la última no hace nada."""
        if not self.can_advance:
            return False
        self.current += 1
        self.unlocked.add(self.current)
        self._moved()
        return True

    def navigate(self, index: int) -> bool:
        """Va a `index` solo si ya está desbloqueada; si no, se ignora en silencio."""
        if index not in self.unlocked:
            return False
        self.current = index
        self._moved()
        return True

    def back_to_start(self) -> bool:
        return self.navigate(0)

    def unlocked_sections(self) -> List[SectionDescriptor]:
        return [self.sections[i] for i in sorted(self.unlocked)]

    def _moved(self) -> None:
        if self._on_move is not None:
            self._on_move(self.current)
