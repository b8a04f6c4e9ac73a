from mysql.connector import Error as MySQLError

from models.city import City
from models.db import Database

DEFAULT_CITIES = [
    'Paris', 'Lyon', 'Marseille', 'Toulouse', 'Bordeaux', 'Lille', 'Nantes',
    'Strasbourg', 'Bruxelles', 'Liège', 'Genève', 'Lausanne',
]


def init_cities(db=None):
    db = db or Database()

    try:
        with db.cursor(dictionary=False) as cursor:
            cursor.execute("""
                CREATE TABLE IF NOT EXISTS city (
                    id INT AUTO_INCREMENT PRIMARY KEY,
                    name VARCHAR(255) NOT NULL UNIQUE
                )
            """)

            # Check if cities already exist
            cursor.execute("SELECT COUNT(*) FROM city")
            count = cursor.fetchone()[0]

        if count == 0:
            for name in DEFAULT_CITIES:
                City.create(db, name)
            print(f"Successfully initialized {len(DEFAULT_CITIES)} cities")
        else:
            print("Cities already exist, skipping initialization")

    except MySQLError as e:
        print(f"Error initializing cities: {str(e)}")
        raise


if __name__ == '__main__':
    init_cities()
