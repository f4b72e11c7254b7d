from typing import Any, Dict, List, Optional

import httpx

DEFAULT_BASE_URL = "http://localhost:8000/api"


class MovieReviewAPIError(Exception):
    def __init__(self, status_code: int, message: str, code: Optional[str] = None, errors: Optional[List[Dict]] = None):
        super().__init__(f"HTTP {status_code}: {message}")
        self.status_code = status_code
        self.message = message
        self.code = code
        self.errors = errors or []


class MovieReviewClient:
    """
    Async client for the Movie Review API.

    `login`/`register` remember the returned token and send it as a bearer
    header on later calls.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        token: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout: float = 20.0
    ):
        self.token = token
        self._client = httpx.AsyncClient(base_url=base_url, transport=transport, timeout=timeout)

    async def __aenter__(self) -> "MovieReviewClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _request(self, method: str, path: str, **kwargs) -> Any:
        headers = kwargs.pop("headers", {})
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"

        response = await self._client.request(method, path, headers=headers, **kwargs)
        if response.is_error:
            try:
                body = response.json()
            except ValueError:
                body = {}
            raise MovieReviewAPIError(
                response.status_code,
                body.get("error") or response.reason_phrase,
                code=body.get("code"),
                errors=body.get("errors"),
            )
        return response.json()

    # ----- auth -----
    async def register(self, username: str, email: str, password: str) -> Dict[str, Any]:
        data = await self._request("POST", "/auth/register", json={
            "username": username, "email": email, "password": password
        })
        self.token = data["token"]
        return data

    async def login(self, email: str, password: str) -> Dict[str, Any]:
        data = await self._request("POST", "/auth/login", json={"email": email, "password": password})
        self.token = data["token"]
        return data

    # ----- movies -----
    async def get_movies(
        self,
        page: int = 1,
        limit: int = 10,
        search: Optional[str] = None,
        genre: Optional[str] = None,
        year: Optional[int] = None,
        sort_by: str = "title"
    ) -> Dict[str, Any]:
        params = {"page": page, "limit": limit, "sortBy": sort_by}
        if search:
            params["search"] = search
        if genre:
            params["genre"] = genre
        if year is not None:
            params["year"] = year
        return await self._request("GET", "/movies", params=params)

    async def get_featured_movies(self) -> List[Dict[str, Any]]:
        return await self._request("GET", "/movies/featured")

    async def get_movie(self, movie_id: int) -> Dict[str, Any]:
        return await self._request("GET", f"/movies/{movie_id}")

    async def create_movie(self, movie: Dict[str, Any]) -> Dict[str, Any]:
        return await self._request("POST", "/movies", json=movie)

    # ----- reviews -----
    async def get_reviews(self, movie_id: int) -> List[Dict[str, Any]]:
        return await self._request("GET", f"/movies/{movie_id}/reviews")

    async def add_review(self, movie_id: int, rating: int, review_text: str) -> Dict[str, Any]:
        return await self._request(
            "POST", f"/movies/{movie_id}/reviews", json={"rating": rating, "reviewText": review_text}
        )

    # ----- users -----
    async def get_profile(self, user_id: int) -> Dict[str, Any]:
        return await self._request("GET", f"/users/{user_id}")

    async def update_profile(self, user_id: int, **fields: Any) -> Dict[str, Any]:
        return await self._request("PUT", f"/users/{user_id}", json=fields)

    async def get_watchlist(self, user_id: int) -> List[Dict[str, Any]]:
        return await self._request("GET", f"/users/{user_id}/watchlist")

    async def add_to_watchlist(self, user_id: int, movie_id: int) -> Dict[str, Any]:
        return await self._request("POST", f"/users/{user_id}/watchlist", json={"movieId": movie_id})

    async def remove_from_watchlist(self, user_id: int, movie_id: int) -> Dict[str, Any]:
        return await self._request("DELETE", f"/users/{user_id}/watchlist/{movie_id}")
