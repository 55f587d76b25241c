"""
Response Cache for the Kigali Zoning Assistant
Fingerprint-keyed answer cache with a 24 hour TTL, backed by SQLite or Redis
"""

import json
import time
import sqlite3
import asyncio
import hashlib
import logging
import threading
from pathlib import Path
from typing import Any, Dict, Optional, Callable, Union
from dataclasses import dataclass, asdict, field
import redis

from config import Config

logger = logging.getLogger(__name__)


def _format_coordinate(value: float) -> str:
    text = f"{float(value):.4f}"
    return "0.0000" if text == "-0.0000" else text


def fingerprint(question: str, lat: float, lng: float, zone_label: Optional[str], language: str) -> str:
    """
    Stable cache key for an answer

    Coordinates are rounded to 4 decimal places (about 11 m), so nearby taps on the
    same spot share one entry. The question is used verbatim.
    """
    raw = f"{question}_{_format_coordinate(lat)}_{_format_coordinate(lng)}_{zone_label or ''}_{language}"
    return hashlib.md5(raw.encode('utf-8')).hexdigest()


@dataclass(frozen=True)
class FingerprintInputs:
    """Fields that identify a cached answer"""
    question: str
    lat: float
    lng: float
    zone_label: Optional[str]
    language: str = "en"

    def fingerprint(self) -> str:
        return fingerprint(self.question, self.lat, self.lng, self.zone_label, self.language)


@dataclass
class CacheEntry:
    """Cache entry with metadata"""
    key: str
    response: str
    metadata: Dict[str, Any] = field(default_factory=dict)
    created_at: float = 0.0
    expires_at: float = 0.0

    def is_expired(self, now: Optional[float] = None) -> bool:
        """Check if cache entry has expired"""
        now = time.time() if now is None else now
        return self.expires_at < now

    def to_dict(self) -> Dict:
        """Convert to dictionary for serialization"""
        return asdict(self)


class SQLiteCacheBackend:
    """SQLite table of cached answers with a unique fingerprint column"""

    def __init__(self, db_path: Union[str, Path] = None):
        self.db_path = Path(db_path or Config.CACHE_DB_PATH)

    def get_connection(self):
        """Get database connection"""
        conn = sqlite3.connect(str(self.db_path), timeout=Config.CACHE_TIMEOUT)
        conn.row_factory = sqlite3.Row  # Enable column access by name
        return conn

    def open(self):
        """Create the cache table if needed"""
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        conn = self.get_connection()
        try:
            with conn:
                conn.execute('''
                    CREATE TABLE IF NOT EXISTS ai_responses (
                        id INTEGER PRIMARY KEY AUTOINCREMENT,
                        fingerprint_hash TEXT UNIQUE NOT NULL,
                        response TEXT NOT NULL,
                        metadata TEXT,  -- JSON object
                        created_at REAL NOT NULL,
                        expires_at REAL NOT NULL
                    )
                ''')
                conn.execute('CREATE INDEX IF NOT EXISTS idx_ai_responses_expires ON ai_responses (expires_at)')
        finally:
            conn.close()
        logger.info(f"SQLite response cache ready at {self.db_path}")

    def close(self):
        # Connections are opened per operation
        pass

    def get(self, key: str) -> Optional[CacheEntry]:
        conn = self.get_connection()
        try:
            row = conn.execute(
                'SELECT fingerprint_hash, response, metadata, created_at, expires_at '
                'FROM ai_responses WHERE fingerprint_hash = ?',
                (key,)
            ).fetchone()
        finally:
            conn.close()

        if row is None:
            return None
        return CacheEntry(
            key=row['fingerprint_hash'],
            response=row['response'],
            metadata=json.loads(row['metadata']) if row['metadata'] else {},
            created_at=row['created_at'],
            expires_at=row['expires_at']
        )

    def upsert(self, entry: CacheEntry):
        conn = self.get_connection()
        try:
            with conn:
                conn.execute('''
                    INSERT INTO ai_responses (fingerprint_hash, response, metadata, created_at, expires_at)
                    VALUES (?, ?, ?, ?, ?)
                    ON CONFLICT (fingerprint_hash) DO UPDATE SET
                        response = excluded.response,
                        metadata = excluded.metadata,
                        created_at = excluded.created_at,
                        expires_at = excluded.expires_at
                ''', (entry.key, entry.response, json.dumps(entry.metadata), entry.created_at, entry.expires_at))
        finally:
            conn.close()

    def delete_expired(self, now: float) -> int:
        conn = self.get_connection()
        try:
            with conn:
                cursor = conn.execute('DELETE FROM ai_responses WHERE expires_at < ?', (now,))
                return cursor.rowcount
        finally:
            conn.close()

    def count(self) -> int:
        conn = self.get_connection()
        try:
            return conn.execute('SELECT COUNT(*) FROM ai_responses').fetchone()[0]
        finally:
            conn.close()


class RedisCacheBackend:
    """Redis-based cache; Redis expires keys itself so sweeping is a no-op"""

    KEY_PREFIX = "kigali:ai_response:"

    def __init__(self, client: Optional[redis.Redis] = None, host: str = None, port: int = None,
                 db: int = None, password: str = None):
        self.client = client or redis.Redis(
            host=host or Config.REDIS_HOST,
            port=port or Config.REDIS_PORT,
            db=db if db is not None else Config.REDIS_DB,
            password=password or Config.REDIS_PASSWORD,
            socket_timeout=Config.CACHE_TIMEOUT,
            decode_responses=True
        )

    def open(self):
        self.client.ping()
        logger.info("Redis response cache connected successfully")

    def close(self):
        self.client.close()

    def get(self, key: str) -> Optional[CacheEntry]:
        data = self.client.get(self.KEY_PREFIX + key)
        if not data:
            return None
        return CacheEntry(**json.loads(data))

    def upsert(self, entry: CacheEntry):
        ttl = max(int(entry.expires_at - entry.created_at), 1)
        self.client.setex(self.KEY_PREFIX + entry.key, ttl, json.dumps(entry.to_dict()))

    def delete_expired(self, now: float) -> int:
        return 0


class ResponseCache:
    """Answer cache keyed by question fingerprint

    Storage errors never reach the caller: a failed read is a miss and a failed
    write is logged and dropped.
    """

    def __init__(self, backend=None, ttl: int = None, clock: Callable[[], float] = time.time,
                 timeout: float = None):
        self.backend = backend if backend is not None else SQLiteCacheBackend()
        self.ttl = ttl if ttl is not None else Config.CACHE_TTL
        self.clock = clock
        self.timeout = timeout if timeout is not None else Config.CACHE_TIMEOUT
        self.stats = {'hits': 0, 'misses': 0, 'writes': 0, 'errors': 0}

    def open(self):
        try:
            self.backend.open()
        except Exception as e:
            self.stats['errors'] += 1
            logger.error(f"Response cache unavailable, answers will not be cached: {e}")

    def close(self):
        try:
            self.backend.close()
        except Exception as e:
            logger.error(f"Error closing response cache: {e}")

    def get(self, inputs: FingerprintInputs) -> Optional[CacheEntry]:
        """Get a live entry, or None on miss, expiry or storage error"""
        key = inputs.fingerprint()
        try:
            entry = self.backend.get(key)
        except Exception as e:
            self.stats['errors'] += 1
            logger.error(f"Cache get error: {e}")
            return None

        if entry is None or entry.is_expired(self.clock()):
            self.stats['misses'] += 1
            return None

        self.stats['hits'] += 1
        logger.debug(f"Cache hit for {key}")
        return entry

    def put(self, inputs: FingerprintInputs, response: str, metadata: Optional[Dict[str, Any]] = None):
        """Insert or overwrite the entry, resetting its expiry to now + TTL"""
        now = self.clock()
        entry = CacheEntry(
            key=inputs.fingerprint(),
            response=response,
            metadata=dict(metadata or {}),
            created_at=now,
            expires_at=now + self.ttl
        )
        try:
            self.backend.upsert(entry)
            self.stats['writes'] += 1
        except Exception as e:
            self.stats['errors'] += 1
            logger.error(f"Cache set error: {e}")

    def sweep_expired(self) -> int:
        """Delete expired entries, returning how many were removed"""
        try:
            removed = self.backend.delete_expired(self.clock())
        except Exception as e:
            self.stats['errors'] += 1
            logger.error(f"Cache sweep error: {e}")
            return 0

        if removed:
            logger.info(f"Removed {removed} expired cached responses")
        return removed

    async def aget(self, inputs: FingerprintInputs, timeout: float = None) -> Optional[CacheEntry]:
        """Async get; a timeout counts as a miss"""
        timeout = timeout if timeout is not None else self.timeout
        try:
            return await asyncio.wait_for(asyncio.to_thread(self.get, inputs), timeout)
        except asyncio.TimeoutError:
            self.stats['errors'] += 1
            logger.warning(f"Cache get timed out after {timeout}s, treating as miss")
            return None

    async def aput(self, inputs: FingerprintInputs, response: str, metadata: Optional[Dict[str, Any]] = None,
                   timeout: float = None):
        """Async put; a timeout drops the write"""
        timeout = timeout if timeout is not None else self.timeout
        try:
            await asyncio.wait_for(asyncio.to_thread(self.put, inputs, response, metadata), timeout)
        except asyncio.TimeoutError:
            self.stats['errors'] += 1
            logger.warning(f"Cache set timed out after {timeout}s, response not cached")

    def get_stats(self) -> Dict:
        """Get cache statistics"""
        total = self.stats['hits'] + self.stats['misses']
        return {
            **self.stats,
            'hit_rate': self.stats['hits'] / total if total else 0.0,
            'backend': type(self.backend).__name__,
            'ttl': self.ttl
        }


class CacheSweeper:
    """Background thread that sweeps expired cache entries on a fixed interval"""

    def __init__(self, cache: ResponseCache, interval: float = None):
        self.cache = cache
        self.interval = interval if interval is not None else Config.CACHE_SWEEP_INTERVAL
        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self):
        if self.is_running:
            return
        self._stop_event.clear()
        self._thread = threading.Thread(target=self._run, name="cache-sweeper", daemon=True)
        self._thread.start()
        logger.info(f"Cache sweeper started (every {self.interval}s)")

    def stop(self, timeout: float = 5.0):
        self._stop_event.set()
        if self._thread is not None:
            self._thread.join(timeout)
            self._thread = None
        logger.info("Cache sweeper stopped")

    def run_once(self) -> int:
        return self.cache.sweep_expired()

    def _run(self):
        while not self._stop_event.wait(self.interval):
            self.run_once()


def create_response_cache(backend_name: str = None, clock: Callable[[], float] = time.time) -> ResponseCache:
    """Build a response cache for the configured backend"""
    backend_name = (backend_name or Config.CACHE_BACKEND).lower()
    if backend_name == 'redis':
        backend = RedisCacheBackend()
    elif backend_name == 'sqlite':
        backend = SQLiteCacheBackend()
    else:
        raise ValueError(f"Unknown cache backend: {backend_name}")
    return ResponseCache(backend=backend, clock=clock)
