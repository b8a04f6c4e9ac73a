class City:
    @staticmethod
    def list_names(db):
        with db.cursor() as cursor:
            cursor.execute("SELECT name FROM city ORDER BY name")
            return cursor.fetchall()

    @staticmethod
    def create(db, name):
        with db.cursor(dictionary=False) as cursor:
            cursor.execute("INSERT INTO city (name) VALUES (%s)", (name,))
            return cursor.lastrowid
