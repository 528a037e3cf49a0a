import pytest

from hutlines.config import SearchSettings, SynergyRule, get_rule
from hutlines.optimizer import OptimizedLine, SynergyCatalog, build_team, estimate_salary, score_line
from hutlines.optimizer.service import commit_line, fill_line, prepare_pool, select_goalies

from tests.helpers import make_player


NAMES = [
    "Alpha", "Bravo", "Charlie", "Delta", "Echo", "Foxtrot", "Golf", "Hotel",
    "India", "Juliet", "Kilo", "Lima", "Mike", "November", "Oscar", "Papa",
]


def _line(base: int = 240, ovr: int = 0, ap: int = 0, salary: int = 0) -> OptimizedLine:
    return OptimizedLine(
        players=(),
        combinations=(),
        base_total_ovr=base,
        total_ovr=base + ovr,
        ovr_bonus=ovr,
        ap_bonus=ap,
        salary_bonus=salary,
        total_salary=0,
    )


@pytest.mark.parametrize(
    "overall, expected",
    [
        (95, 12_500_000),
        (90, 10_000_000),
        (89, 8_200_000),
        (85, 5_000_000),
        (84, 3_600_000),
        (80, 2_000_000),
        (79, 1_875_000),
        (60, -500_000),
    ],
)
def test_estimate_salary_steps(overall, expected):
    assert estimate_salary(overall) == expected


def test_score_weighting_order_on_top_slots():
    base = score_line(_line(), 1)

    ovr_gain = score_line(_line(ovr=1), 1) - base
    ap_gain = score_line(_line(ap=5), 1) - base
    salary_gain = score_line(_line(salary=3_000_000), 1) - base
    rating_gain = score_line(_line(base=241), 1) - base

    assert ovr_gain > ap_gain > salary_gain > rating_gain > 0


def test_depth_slots_shift_weight_to_ability_points():
    ap_top = score_line(_line(ap=5), 1) - score_line(_line(), 1)
    ap_depth = score_line(_line(ap=5), 3) - score_line(_line(), 3)
    ovr_top = score_line(_line(ovr=2), 2) - score_line(_line(), 2)
    ovr_depth = score_line(_line(ovr=2), 4) - score_line(_line(), 4)

    assert ap_depth == 2 * ap_top
    assert ovr_top == 2 * ovr_depth


def test_exact_three_player_salary_combination():
    forwards = [
        make_player("f1", "Alpha Skater", team="CZE", overall=90),
        make_player("f2", "Bravo Skater", team="LAK", overall=88),
        make_player("f3", "Charlie Skater", team="SWE", overall=85),
    ]
    catalog = SynergyCatalog([get_rule("f1")])

    team = build_team(forwards, [], [], catalog=catalog)

    assert len(team.forward_lines) == 1
    line = team.forward_lines[0]
    assert {player.player_id for player in line.players} == {"f1", "f2", "f3"}
    assert line.combinations == (get_rule("f1"),)
    assert line.base_total_ovr == 263
    assert line.total_ovr == 263
    assert line.salary_bonus == 2_000_000
    assert line.ovr_bonus == 0
    assert line.ap_bonus == 0
    assert line.total_salary == 10_000_000 + 7_400_000 + 5_000_000 - 2_000_000
    assert team.total_salary_bonus == 2_000_000
    assert team.total_salary == line.total_salary


def test_pool_exhaustion_stops_early():
    forwards = [make_player(f"f{i}", f"{NAMES[i]} Skater", team="AAA", overall=80 + i) for i in range(5)]

    team = build_team(forwards, [], [])

    assert len(team.forward_lines) == 1
    assert len(team.forward_lines[0].players) == 3
    assert team.defense_lines == ()
    assert team.goalies == ()


def test_defense_pairs_without_defense_rules():
    defensemen = [
        make_player(f"d{i}", f"{NAMES[i]} Blueliner", team="AAA", overall=90 - i, position="D")
        for i in range(6)
    ]
    catalog = SynergyCatalog([get_rule("f1")])

    team = build_team([], defensemen, [], catalog=catalog)

    assert len(team.defense_lines) == 3
    for line in team.defense_lines:
        assert len(line.players) == 2
        assert line.combinations == ()
        assert (line.ovr_bonus, line.ap_bonus, line.salary_bonus) == (0, 0, 0)
    assert [[p.player_id for p in line.players] for line in team.defense_lines] == [
        ["d0", "d1"],
        ["d2", "d3"],
        ["d4", "d5"],
    ]


def _ana_pool():
    ducks = [make_player(f"a{i}", f"{NAMES[i]} Duck", team="ANA", overall=80) for i in range(3)]
    stars = [make_player(f"s{i}", f"{NAMES[i + 3]} Star", team="AAA", overall=90) for i in range(3)]
    return ducks + stars


def test_top_line_prefers_overall_combination():
    team = build_team(_ana_pool(), [], [])

    first, second = team.forward_lines
    assert {player.team for player in first.players} == {"ANA"}
    assert [rule.rule_id for rule in first.combinations] == ["f7"]
    assert first.total_ovr == 242
    assert {player.player_id for player in second.players} == {"s0", "s1", "s2"}
    assert team.total_ovr_bonus == 2


def test_search_budget_caps_candidates():
    settings = SearchSettings(forward_caps=(1,), defense_caps=())

    team = build_team(_ana_pool(), [], [], settings=settings)

    assert len(team.forward_lines) == 1
    assert {player.player_id for player in team.forward_lines[0].players} == {"s0", "s1", "s2"}


def test_rule_with_wrong_requirement_count_never_applies():
    broken = SynergyRule(rule_id="bad", kind="forward", requirements=("ANA", "ANA"), boost="2 OVR")

    team = build_team(_ana_pool(), [], [], catalog=SynergyCatalog([broken]))

    assert all(line.combinations == () for line in team.forward_lines)


def _full_roster():
    forwards = [
        make_player(f"f{i}", f"{NAMES[i]} Forward", team=team, nationality=nat, overall=78 + i)
        for i, (team, nat) in enumerate(
            [
                ("ANA", "CAN"), ("ANA", "USA"), ("ANA", "SWE"), ("PIT", "CAN"),
                ("PIT", "RUS"), ("NYR", "USA"), ("NYR", "FIN"), ("TOR", "CAN"),
                ("MTL", "CAN"), ("BOS", "CZE"), ("VGK", "USA"), ("EDM", "GER"),
            ]
        )
    ]
    forwards.append(make_player("dup", "ALPHA FORWARD", team="CAN", nationality="CAN", overall=99))
    defensemen = [
        make_player(f"d{i}", f"{NAMES[i]} Defender", team=team, nationality=nat, overall=80 + i, position="D")
        for i, (team, nat) in enumerate(
            [("DAL", "USA"), ("STL", "CAN"), ("BOS", "CAN"), ("BOS", "SWE"), ("LAK", "USA"), ("PIT", "CAN"), ("CAR", "FIN")]
        )
    ]
    defensemen.append(make_player("fd", "Bravo Forward", team="BOS", overall=97, position="D"))
    goalies = [
        make_player("g0", "Charlie Forward", team="NYR", overall=99, position="G"),
        make_player("g1", "Quebec Goalie", team="NYR", overall=85, position="G"),
        make_player("g2", "Romeo Goalie", team="BOS", overall=88, position="G"),
        make_player("g3", "Sierra Goalie", team="DAL", overall=80, position="G"),
    ]
    return forwards, defensemen, goalies


def test_no_person_is_used_twice():
    forwards, defensemen, goalies = _full_roster()

    team = build_team(forwards, defensemen, goalies)

    members = [player for line in team.forward_lines + team.defense_lines for player in line.players]
    members.extend(team.goalies)
    keys = [player.name_key for player in members]
    assert len(keys) == len(set(keys))
    assert all(len(line.players) == 3 for line in team.forward_lines)
    assert all(len(line.players) == 2 for line in team.defense_lines)
    assert len(team.forward_lines) == 4
    assert len(team.defense_lines) == 3
    assert len(team.goalies) <= 2


def test_build_is_deterministic():
    forwards, defensemen, goalies = _full_roster()

    first = build_team(forwards, defensemen, goalies)
    second = build_team(forwards, defensemen, goalies)

    assert first == second
    assert [line.score for line in first.forward_lines] == [line.score for line in second.forward_lines]


def test_totals_add_up():
    forwards, defensemen, goalies = _full_roster()

    team = build_team(forwards, defensemen, goalies)
    lines = team.forward_lines + team.defense_lines

    assert team.total_ovr == sum(line.total_ovr for line in lines) + sum(g.overall for g in team.goalies)
    assert team.total_salary == sum(line.total_salary for line in lines) + sum(g.salary for g in team.goalies)
    assert team.total_ap_bonus == sum(line.ap_bonus for line in lines)


def test_goalies_by_rating_skip_used_people():
    goalies = prepare_pool(
        [
            make_player("g0", "Alpha Goalie", team="AAA", overall=70, position="G"),
            make_player("g1", "Bravo Goalie", team="AAA", overall=90, position="G"),
            make_player("g2", "Charlie Goalie", team="AAA", overall=85, position="G"),
            make_player("g3", "BRAVO GOALIE", team="BBB", overall=88, position="G"),
        ]
    )

    picked = select_goalies(goalies, frozenset(), 2)
    assert [goalie.player_id for goalie in picked] == ["g1", "g2"]

    picked = select_goalies(goalies, frozenset({"charliegoalie"}), 2)
    assert [goalie.player_id for goalie in picked] == ["g1", "g0"]


def test_prepare_pool_sorts_stably_and_attaches_salary():
    pool = prepare_pool(
        [
            make_player("a", "Alpha Skater", team="AAA", overall=80),
            make_player("b", "Bravo Skater", team="AAA", overall=90),
            make_player("c", "Charlie Skater", team="AAA", overall=80),
        ]
    )

    assert [player.player_id for player in pool] == ["b", "a", "c"]
    assert [player.salary for player in pool] == [10_000_000, 2_000_000, 2_000_000]


def test_slot_by_slot_fill_and_commit():
    pool = prepare_pool(
        [make_player(f"d{i}", f"{NAMES[i]} Defender", team="AAA", overall=85, position="D") for i in range(3)]
    )
    catalog = SynergyCatalog()
    used = frozenset()

    line = fill_line(pool, kind="defense", slot_number=1, used_names=used, catalog=catalog, cap=100)
    assert line is not None
    updated = commit_line(used, line)

    assert used == frozenset()
    assert updated == {player.name_key for player in line.players}
    assert fill_line(pool, kind="defense", slot_number=2, used_names=updated, catalog=catalog, cap=50) is None


def test_malformed_rating_does_not_abort():
    forwards = [
        make_player("f0", "Alpha Skater", team="AAA", overall="N/A"),
        make_player("f1", "Bravo Skater", team="AAA", overall=80),
        make_player("f2", "Charlie Skater", team="AAA", overall=82),
    ]

    team = build_team(forwards, [], [])

    assert team.forward_lines[0].base_total_ovr == 162
