
import pytest

from moviereview.services.rating_service import RatingAggregator, average_rating


@pytest.mark.parametrize("ratings, expected", [
    ([], (0.0, 0)),
    ([5], (5.0, 1)),
    ([4, 5], (4.5, 2)),
    ([1, 2, 2], (1.7, 3)),
    # 4.25 rounds half up, not to even
    ([4, 4, 4, 5], (4.3, 4)),
    ([3, 4, 4, 4], (3.8, 4)),
])
def test_average_rating(ratings, expected):
    assert average_rating(ratings) == expected


@pytest.mark.asyncio
async def test_recompute_writes_result_onto_movie(make_movie, movie_repo, review_repo):
    movie = await make_movie(title="Heat")
    await review_repo.create_review(movie.id, 1, 4, "good")
    await review_repo.create_review(movie.id, 2, 3, "fine")

    aggregator = RatingAggregator(movie_repo, review_repo)
    result = await aggregator.recompute(movie.id)

    assert result == (3.5, 2)
    assert movie.average_rating == 3.5
    assert movie.total_reviews == 2


@pytest.mark.asyncio
async def test_recompute_ignores_other_movies(make_movie, movie_repo, review_repo):
    heat = await make_movie(title="Heat")
    ronin = await make_movie(title="Ronin")
    await review_repo.create_review(ronin.id, 1, 1, "no")

    aggregator = RatingAggregator(movie_repo, review_repo)

    assert await aggregator.recompute(heat.id) == (0.0, 0)
    assert heat.average_rating == 0.0


@pytest.mark.asyncio
async def test_recompute_unknown_movie_still_succeeds(movie_repo, review_repo):
    aggregator = RatingAggregator(movie_repo, review_repo)
    assert await aggregator.recompute(999) == (0.0, 0)
