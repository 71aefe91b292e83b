"""Rendering of the listening summary document"""
import logging
import os
from datetime import datetime, timezone
from typing import Optional

from spotify_readme.models.stats import TrackSummary

logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

def format_timestamp(moment: datetime) -> str:
    """UTC timestamp with second precision"""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc).strftime(TIMESTAMP_FORMAT)

def genre_link(genre: str, search_url: str) -> str:
    return f'<a href="{search_url}{genre} music">{genre}</a>'

def render_readme(track: TrackSummary, long_term_genre: str, recent_genre: str,
                  profile_url: str, search_url: str, about_url: Optional[str] = None,
                  now: Optional[datetime] = None) -> str:
    """
    Format the document. Values are interpolated as is, nothing is escaped.

    Args:
        track: Current most played track
        long_term_genre: Most listened genre over the long-term window
        recent_genre: Most listened genre among recently played tracks
        profile_url: Spotify profile linked from the first sentence
        search_url: Prefix of the genre search links
        about_url: Optional link explaining the generated file
        now: Render time, defaults to the current UTC time
    """
    timestamp = format_timestamp(now or datetime.now(timezone.utc))
    note = "This file is generated automatically."
    if about_url:
        note += f' Read more <a href="{about_url}">here</a>.'

    return f"""
  Currently, I can't get enough of the song <a href="{track.song_link}">{track.song_name}</a> by <a href="{track.artist_link}">{track.artist_name}</a> on <a href="{profile_url}">Spotify</a>.

  My most listened genre is {genre_link(long_term_genre, search_url)}.
  Still, I've been listening to a lot of {genre_link(recent_genre, search_url)} lately.

  {note}
  <br>
  <sub>Last modified at {timestamp}.</sub>
  """

def write_readme(path: str, content: str) -> None:
    """Overwrite the output file"""
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(path, 'w', encoding='utf-8') as f:
        f.write(content)
    logger.info(f"Wrote {len(content)} characters to {path}")
