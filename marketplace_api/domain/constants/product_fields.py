"""Constants for Product model field names"""


class ProductFields:
    """Field name constants for Product documents"""
    TITLE = "title"
    DESCRIPTION = "description"
    CATEGORIA = "categoria"
    IMAGE = "image"
    IMAGES = "images"
    PROVINCIA = "provincia"
    OWNER_ID = "ownerId"
    OWNER_NAME = "ownerName"
    CONDICION = "condicion"
    VALOR_ESTIMADO = "valorEstimado"
    DISPONIBLE = "disponible"
    FECHA_PUBLICACION = "fechaPublicacion"
    
    # MongoDB specific
    MONGO_ID = "_id"
