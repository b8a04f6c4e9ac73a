from flask import Blueprint, jsonify, current_app
from mysql.connector import Error as MySQLError

from models.city import City

city_bp = Blueprint('city', __name__)


@city_bp.route('/cities', methods=['GET'])
def list_cities():
    try:
        rows = City.list_names(current_app.extensions['db'])
    except MySQLError as e:
        current_app.logger.error(f"Database error in list_cities: {str(e)}")
        return jsonify({"error": "Erreur de base de données"}), 500

    return jsonify({"tables": rows}), 200
