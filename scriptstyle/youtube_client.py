"""
YouTube Client
==============

Fetch channel metadata and recent uploads from the YouTube Data API v3.

Features:
- Channel lookup by ID, @handle (forHandle) or legacy vanity name
- Uploads playlist listing (most recent first, as returned by the API)
- API key or service account authentication
"""

import logging
from typing import Dict, List, Optional, Tuple

import requests
from dateutil import parser as dtparser

from .auth_helper import bearer_headers, load_credentials
from .errors import ConfigurationError, NotFoundError, UpstreamError
from .models import ChannelInfo, ResolvedChannel, VideoEntry

logger = logging.getLogger(__name__)

YT_API = "https://www.googleapis.com/youtube/v3"
MAX_VIDEOS = 10

CHANNEL_FETCH_FAILED = "Failed to fetch channel information. Make sure the channel exists."


class YouTubeClient:
    """
    Thin wrapper around the Data API endpoints the pipeline needs.

    Usage:
        client = YouTubeClient(api_key="...")
        channel, videos = client.fetch_channel_and_videos(resolved)
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        service_account_path: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = 30.0,
        credentials=None,
    ):
        self.api_key = api_key
        self.service_account_path = service_account_path
        # Loaded once; the token is refreshed only when it expires
        if credentials is None and service_account_path:
            credentials = load_credentials(service_account_path)
        self.credentials = credentials
        self.session = session or requests.Session()
        self.timeout = timeout

    def _get(self, path: str, **params) -> requests.Response:
        """Make a GET request using the service account or the API key."""
        headers: Dict[str, str] = {}
        if self.credentials is not None:
            headers = bearer_headers(self.credentials)
        elif self.api_key:
            params["key"] = self.api_key
        else:
            raise ConfigurationError("Missing YT_API_KEY or GOOGLE_SERVICE_ACCOUNT_PATH in environment.")

        return self.session.get(f"{YT_API}/{path}", params=params, headers=headers, timeout=self.timeout)

    def _channels(self, **lookup) -> dict:
        try:
            r = self._get("channels", part="snippet,contentDetails", **lookup)
        except requests.RequestException as e:
            logger.error(f"Channel lookup {lookup} failed: {type(e).__name__}: {e}")
            raise UpstreamError(CHANNEL_FETCH_FAILED, status_code=400) from e
        if r.status_code != 200:
            logger.error(f"YT API error {r.status_code} for {lookup}: {r.text[:200]}")
            raise UpstreamError(CHANNEL_FETCH_FAILED, status_code=400)
        try:
            data = r.json()
        except ValueError as e:
            logger.error(f"YT API returned a non-JSON body for {lookup}: {r.text[:200]}")
            raise UpstreamError(CHANNEL_FETCH_FAILED, status_code=400) from e
        if not isinstance(data, dict):
            raise UpstreamError(CHANNEL_FETCH_FAILED, status_code=400)
        return data

    def _search_channel_id(self, query: str) -> Optional[str]:
        """Use the search API to find the most plausible channel for a vanity name."""
        try:
            r = self._get("search", part="snippet", q=query, type="channel", maxResults=1)
        except requests.RequestException as e:
            logger.warning(f"Channel search for {query!r} failed: {e}")
            return None
        if r.status_code != 200:
            logger.warning(f"Channel search for {query!r} returned {r.status_code}")
            return None
        try:
            items = r.json().get("items") or []
            return items[0]["snippet"]["channelId"] if items else None
        except (ValueError, AttributeError, LookupError, TypeError) as e:
            logger.warning(f"Channel search for {query!r} returned an unusable body: {type(e).__name__}")
            return None

    def fetch_channel(self, resolved: ResolvedChannel) -> ChannelInfo:
        """
        Look up a channel's title and uploads playlist.

        Raises:
            UpstreamError (400) on a non-success response
            NotFoundError if the API returns no matching channel
        """
        if resolved.kind == "id":
            data = self._channels(id=resolved.value)
        elif resolved.kind == "handle":
            data = self._channels(forHandle=resolved.value)
        else:
            # Legacy /c/ names: username lookup, then search
            data = self._channels(forUsername=resolved.value)
            if not data.get("items"):
                cid = self._search_channel_id(resolved.value)
                if cid:
                    data = self._channels(id=cid)

        items = data.get("items") or []
        if not items:
            raise NotFoundError("Channel not found")

        ch = items[0]
        uploads = ch.get("contentDetails", {}).get("relatedPlaylists", {}).get("uploads")
        return ChannelInfo(
            channel_id=ch["id"],
            title=ch["snippet"]["title"],
            uploads_playlist_id=uploads or None,
        )

    def list_uploads(self, playlist_id: Optional[str], limit: int = MAX_VIDEOS) -> List[VideoEntry]:
        """
        List the most recent entries of an uploads playlist.

        A missing playlist or a failed request gives an empty list; the
        transcript stage decides whether that is fatal.
        """
        if not playlist_id:
            return []

        try:
            r = self._get("playlistItems", part="snippet", playlistId=playlist_id, maxResults=limit)
        except requests.RequestException as e:
            logger.warning(f"Playlist {playlist_id} request failed: {e}")
            return []
        if r.status_code != 200:
            logger.warning(f"Playlist {playlist_id} returned {r.status_code}: {r.text[:200]}")
            return []

        try:
            items = r.json().get("items") or []
        except (ValueError, AttributeError) as e:
            logger.warning(f"Playlist {playlist_id} returned an unusable body: {type(e).__name__}")
            return []

        videos: List[VideoEntry] = []
        for it in items:
            sn = it.get("snippet", {})
            vid = sn.get("resourceId", {}).get("videoId")
            if not vid:
                continue
            published = sn.get("publishedAt")
            videos.append(VideoEntry(
                video_id=vid,
                title=sn.get("title", ""),
                published_at=dtparser.isoparse(published) if published else None,
            ))
        return videos[:limit]

    def fetch_channel_and_videos(
        self,
        resolved: ResolvedChannel,
        limit: int = MAX_VIDEOS,
    ) -> Tuple[ChannelInfo, List[VideoEntry]]:
        channel = self.fetch_channel(resolved)
        videos = self.list_uploads(channel.uploads_playlist_id, limit=limit)
        logger.info(f"Found {len(videos)} recent uploads for {channel.title} ({channel.channel_id})")
        return channel, videos
