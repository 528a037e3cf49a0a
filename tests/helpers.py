from hutlines.models import PlayerRecord


def make_player(
    player_id: str,
    name: str,
    team: str,
    nationality: str = "ZZZ",
    overall: int | str = 80,
    position: str = "C",
) -> PlayerRecord:
    return PlayerRecord(
        player_id=player_id,
        name=name,
        position=position,
        team=team,
        nationality=nationality,
        overall=overall,
    )
