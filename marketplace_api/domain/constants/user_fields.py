"""Constants for User model field names"""


class UserFields:
    """Field name constants for User documents (wire names kept as stored)"""
    ID = "id"
    EMAIL = "email"
    USERNAME = "username"
    NOMBRE = "nombre"
    APELLIDO = "apellido"
    IMAGEN = "imagen"
    ZONA = "zona"
    UBICACION = "ubicacion"
    TELEFONO = "telefono"
    MOSTRAR_CONTACTO = "mostrarContacto"
    PASSWORD = "password"
    FAVORITOS = "favoritos"
    TRANSACCIONES = "transacciones"
    
    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field
