from rest_framework import serializers

from registros.validadores import validar_registro


class RegistroSerializer(serializers.Serializer):
    # las reglas viven en validar_registro (mismas que el formulario web)
    cedula = serializers.CharField(required=False, allow_blank=True, trim_whitespace=False)
    nombre_apellido = serializers.CharField(required=False, allow_blank=True, trim_whitespace=False)
    centro_electoral = serializers.CharField(required=False, allow_blank=True, trim_whitespace=False)
    telefono = serializers.CharField(required=False, allow_blank=True, trim_whitespace=False)
    redes_sociales = serializers.CharField(required=False, allow_blank=True, allow_null=True, trim_whitespace=False)
    hora_asistencia = serializers.CharField(required=False, allow_blank=True, trim_whitespace=False)

    def validate(self, attrs):
        errores = validar_registro(attrs)
        if errores:
            raise serializers.ValidationError({campo: [msg] for campo, msg in errores.items()})
        return attrs


class FilaRegistroSerializer(serializers.Serializer):
    id = serializers.CharField()
    cedula = serializers.CharField()
    nombre_apellido = serializers.CharField()
    centro_electoral = serializers.CharField()
    telefono = serializers.CharField()
    redes_sociales = serializers.CharField(allow_null=True)
    hora_asistencia = serializers.CharField()
    created_at = serializers.DateTimeField(allow_null=True)
