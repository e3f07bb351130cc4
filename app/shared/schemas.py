from pydantic import BaseModel, model_serializer


class IdFirstModel(BaseModel):
    """Respuesta de una entidad guardada: "id" se serializa antes que el resto de campos"""

    @model_serializer(mode="wrap")
    def serialize_id_first(self, handler):
        data = handler(self)
        if isinstance(data, dict) and "id" in data:
            return {"id": data.pop("id"), **data}
        return data
