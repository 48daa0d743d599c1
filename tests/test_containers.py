import pytest

from rustdrill.drills.containers import (
    Command,
    Cons,
    DivideByZeroError,
    DivisionError,
    Fruit,
    NotDivisibleError,
    Progress,
    Team,
    build_scores_table,
    capitalize_first,
    capitalize_words_string,
    capitalize_words_vector,
    count_collection_for,
    count_collection_iterator,
    count_for,
    count_iterator,
    create_empty_list,
    create_non_empty_list,
    divide,
    factorial,
    fruit_basket,
    list_of_results,
    result_with_list,
    transformer,
)


def get_fruit_basket():
    return {Fruit.APPLE: 4, Fruit.MANGO: 2, Fruit.LYCHEE: 5}


def test_given_fruits_are_not_modified():
    basket = get_fruit_basket()
    fruit_basket(basket)
    assert basket[Fruit.APPLE] == 4
    assert basket[Fruit.MANGO] == 2
    assert basket[Fruit.LYCHEE] == 5


def test_at_least_five_types_of_fruits():
    basket = get_fruit_basket()
    fruit_basket(basket)
    assert len(basket) >= 5


def test_greater_than_eleven_fruits():
    basket = get_fruit_basket()
    fruit_basket(basket)
    assert sum(basket.values()) > 11


def test_all_fruit_types_in_basket():
    basket = get_fruit_basket()
    fruit_basket(basket)
    assert all(amount != 0 for amount in basket.values())
    assert set(basket) == set(Fruit)


RESULTS = (
    "England,France,4,2\n"
    "France,Italy,3,1\n"
    "Poland,Spain,2,0\n"
    "Germany,England,2,1\n"
)


def test_build_scores():
    scores = build_scores_table(RESULTS)
    assert sorted(scores) == ["England", "France", "Germany", "Italy", "Poland", "Spain"]


def test_validate_team_score_1():
    team = build_scores_table(RESULTS)["England"]
    assert team.goals_scored == 5
    assert team.goals_conceded == 4


def test_validate_team_score_2():
    team = build_scores_table(RESULTS)["Spain"]
    assert team.goals_scored == 0
    assert team.goals_conceded == 2


def test_scores_table_rejects_bad_goals():
    with pytest.raises(ValueError):
        build_scores_table("A,B,x,1\n")
    with pytest.raises(ValueError):
        build_scores_table("A,B,256,1\n")


def test_team_overflow():
    team = Team(250, 0)
    with pytest.raises(OverflowError):
        team.record(10, 0)


def test_capitalize_success():
    assert capitalize_first("hello") == "Hello"


def test_capitalize_empty():
    assert capitalize_first("") == ""


def test_iterate_string_vec():
    assert capitalize_words_vector(["hello", "world"]) == ["Hello", "World"]


def test_iterate_into_string():
    assert capitalize_words_string(["hello", " ", "world"]) == "Hello World"


def test_divide_success():
    assert divide(81, 9) == 9


def test_not_divisible():
    with pytest.raises(NotDivisibleError) as info:
        divide(81, 6)
    assert info.value == NotDivisibleError(81, 6)
    assert (info.value.dividend, info.value.divisor) == (81, 6)


def test_divide_by_0():
    with pytest.raises(DivideByZeroError):
        divide(81, 0)


def test_division_errors_share_base():
    with pytest.raises(DivisionError):
        divide(1, 0)


def test_divide_0_by_something():
    assert divide(0, 81) == 0


def test_result_with_list():
    assert result_with_list() == [1, 11, 1426, 3]


def test_list_of_results():
    assert list_of_results() == [1, 11, 1426, 3]


@pytest.mark.parametrize("num, expected", [(0, 1), (1, 1), (2, 2), (4, 24)])
def test_factorial(num, expected):
    assert factorial(num) == expected


def test_factorial_errors():
    with pytest.raises(ValueError):
        factorial(-1)
    with pytest.raises(OverflowError):
        factorial(21)


def get_map():
    return {
        "variables1": Progress.COMPLETE,
        "functions1": Progress.COMPLETE,
        "hashmap1": Progress.COMPLETE,
        "arc1": Progress.SOME,
        "as_ref_mut": Progress.NONE,
        "from_str": Progress.NONE,
    }


def get_vec_map():
    other = {
        "variables2": Progress.COMPLETE,
        "functions2": Progress.COMPLETE,
        "if1": Progress.COMPLETE,
        "from_into": Progress.NONE,
        "try_from_into": Progress.NONE,
    }
    return [get_map(), other]


def test_count_complete():
    assert count_iterator(get_map(), Progress.COMPLETE) == 3


def test_count_some():
    assert count_iterator(get_map(), Progress.SOME) == 1


def test_count_none():
    assert count_iterator(get_map(), Progress.NONE) == 2


def test_count_complete_equals_for():
    progress_map = get_map()
    for state in (Progress.COMPLETE, Progress.SOME, Progress.NONE):
        assert count_for(progress_map, state) == count_iterator(progress_map, state)


def test_count_collection_complete():
    assert count_collection_iterator(get_vec_map(), Progress.COMPLETE) == 6


def test_count_collection_some():
    assert count_collection_iterator(get_vec_map(), Progress.SOME) == 1


def test_count_collection_none():
    assert count_collection_iterator(get_vec_map(), Progress.NONE) == 4


def test_count_collection_equals_for():
    collection = get_vec_map()
    for state in (Progress.COMPLETE, Progress.SOME, Progress.NONE):
        assert count_collection_for(collection, state) == count_collection_iterator(
            collection, state
        )


def test_transformer_it_works():
    output = transformer(
        [
            ("hello", Command.uppercase()),
            (" all roads lead to rome! ", Command.trim()),
            ("foo", Command.append(1)),
            ("bar", Command.append(5)),
        ]
    )
    assert output[0] == "HELLO"
    assert output[1] == "all roads lead to rome!"
    assert output[2] == "foobar"
    assert output[3] == "barbarbarbarbarbar"


def test_command_rejects_negative_append():
    with pytest.raises(ValueError):
        Command.append(-1)


def test_create_empty_list():
    assert create_empty_list() is None


def test_create_non_empty_list():
    non_empty = create_non_empty_list()
    assert non_empty == Cons(1)
    assert non_empty != create_empty_list()


def test_cons_iteration():
    assert list(Cons(1, Cons(2, Cons(3)))) == [1, 2, 3]
    assert list(create_non_empty_list()) == [1]