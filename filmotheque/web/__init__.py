"""
Interface web (API JSON) de Filmotheque, basee sur FastAPI.
"""
