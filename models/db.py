from contextlib import contextmanager

from mysql.connector import pooling

import config


class Database:
    """Connection pool handle, created by the app and passed to the models.

    The pool itself is opened on first use so the app can start without
    a reachable database.
    """

    def __init__(self, db_config=None, pool_size=None, pool_name='ecotrajet'):
        self.db_config = db_config or config.DB_CONFIG
        self.pool_size = pool_size or config.DB_POOL_SIZE
        self.pool_name = pool_name
        self._pool = None

    def _get_pool(self):
        if self._pool is None:
            self._pool = pooling.MySQLConnectionPool(
                pool_name=self.pool_name,
                pool_size=self.pool_size,
                **self.db_config
            )
        return self._pool

    @contextmanager
    def connection(self):
        conn = self._get_pool().get_connection()
        try:
            yield conn
        finally:
            # returns the connection to the pool
            conn.close()

    @contextmanager
    def cursor(self, dictionary=True):
        with self.connection() as conn:
            cursor = conn.cursor(dictionary=dictionary)
            try:
                yield cursor
                conn.commit()
            except Exception:
                conn.rollback()
                raise
            finally:
                cursor.close()
