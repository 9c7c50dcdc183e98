"""Base template library.

Static per-band weekly templates and per-band descriptive text used as
seed data for plan generation. Everything here is read-only.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from clubcoach.planning.types import PlanBand, VolumeLevel

PLAN_BANDS: tuple[PlanBand, ...] = ("06-08", "09-11", "12-14")
VOLUME_ORDER: tuple[VolumeLevel, ...] = ("baixo", "medio", "alto")


@dataclass(frozen=True)
class WeekTemplate:
    """Seed content for one template week.

    Attributes:
        week: Position in the template (1-based)
        title: Template theme title
        focus: Comma-separated focus text
        volume: Target volume level
        notes: Coaching notes (first is used as constraints, second as warmup profile)
    """

    week: int
    title: str
    focus: str
    volume: VolumeLevel
    notes: tuple[str, ...]


BASE_TEMPLATES: Mapping[PlanBand, tuple[WeekTemplate, ...]] = MappingProxyType(
    {
        "06-08": (
            WeekTemplate(1, "Base ludica", "Coordenacao, brincadeiras e jogos simples", "baixo", ("Bola leve, rede baixa", "1x1 e 2x2")),
            WeekTemplate(2, "Fundamentos", "Toque, manchete e controle basico", "medio", ("Series curtas", "Feedback simples")),
            WeekTemplate(3, "Jogo reduzido", "Cooperacao e tomada de decisao", "medio", ("Jogos 2x2/3x3", "Regras simples")),
            WeekTemplate(4, "Recuperacao", "Revisao e prazer pelo jogo", "baixo", ("Menos repeticoes", "Mais variacao")),
        ),
        "09-11": (
            WeekTemplate(1, "Base tecnica", "Fundamentos e controle de bola", "medio", ("2-3 sessoes/semana", "Equilibrio e core")),
            WeekTemplate(2, "Tomada de decisao", "Leitura simples de jogo e cooperacao", "medio", ("Jogos condicionados", "Ritmo moderado")),
            WeekTemplate(3, "Intensidade controlada", "Velocidade e saltos com controle", "alto", ("Monitorar saltos", "Pausas ativas")),
            WeekTemplate(4, "Recuperacao", "Tecnica leve e prevencao", "baixo", ("Volleyveilig simples", "Mobilidade")),
        ),
        "12-14": (
            WeekTemplate(1, "Base tecnica", "Refino de fundamentos e posicao", "medio", ("Sessoes 60-90 min", "Ritmo controlado")),
            WeekTemplate(2, "Potencia controlada", "Salto, deslocamento e reacao", "alto", ("Pliometria leve", "Forca 50-70% 1RM")),
            WeekTemplate(3, "Sistema de jogo", "Transicao defesa-ataque e 4x4/6x6", "alto", ("Leitura de bloqueio", "Decisao rapida")),
            WeekTemplate(4, "Recuperacao", "Prevencao e consolidacao tecnica", "baixo", ("Volleyveilig completo", "Menos saltos")),
        ),
    }
)

PHYSICAL_FOCUS_BY_BAND: Mapping[PlanBand, str] = MappingProxyType(
    {
        "06-08": "Coordenacao e equilibrio",
        "09-11": "Forca leve e agilidade",
        "12-14": "Potencia controlada",
    }
)

MV_FORMAT_BY_BAND: Mapping[PlanBand, str] = MappingProxyType(
    {
        "06-08": "1x1/2x2",
        "09-11": "2x2/3x3",
        "12-14": "4x4/6x6",
    }
)

DEFAULT_MV_LEVEL_BY_BAND: Mapping[PlanBand, str] = MappingProxyType(
    {
        "06-08": "MV1",
        "09-11": "MV2",
        "12-14": "MV3",
    }
)

JUMP_TARGET_BY_MV_LEVEL: Mapping[str, str] = MappingProxyType(
    {
        "MV1": "10-20",
        "MV2": "20-40",
        "MV3": "30-60",
    }
)

BAND_SUMMARY: Mapping[PlanBand, tuple[str, ...]] = MappingProxyType(
    {
        "06-08": (
            "Foco em alfabetizacao motora e jogo",
            "Sessoes curtas e ludicas",
            "Sem cargas externas",
        ),
        "09-11": (
            "Fundamentos + tomada de decisao",
            "Controle de volume e saltos",
            "Aquecimento preventivo simples",
        ),
        "12-14": (
            "Tecnica eficiente + sistema de jogo",
            "Forca moderada e pliometria controlada",
            "Monitorar PSE e recuperacao",
        ),
    }
)

# Bar height for each volume level in cycle overviews.
VOLUME_TO_RATIO: Mapping[VolumeLevel, float] = MappingProxyType(
    {
        "baixo": 0.35,
        "medio": 0.65,
        "alto": 0.9,
    }
)


def get_template_for_week(band: PlanBand, week_number: int) -> WeekTemplate:
    """Select the template week that seeds a given cycle week.

    Templates repeat every len(template) weeks.
    """
    templates = BASE_TEMPLATES[band]
    return templates[(week_number - 1) % len(templates)]


def get_band_summary(band: PlanBand) -> list[str]:
    """Coaching guidelines shown for a band."""
    return list(BAND_SUMMARY[band])
