"""Tests de la connexion et de la garde des routes d'administration."""


class TestLogin:
    def test_formulaire(self, client):
        response = client.get("/login")
        assert response.status_code == 200
        assert 'name="password"' in response.text

    def test_connexion_reussie(self, client, admin_user):
        response = client.post(
            "/login",
            data={"username": "admin", "password": "secret-admin"},
            follow_redirects=False,
        )
        assert response.status_code == 303
        assert response.headers["location"] == "/admin/formations"

        assert client.get("/admin/formations").status_code == 200

    def test_mauvais_mot_de_passe(self, client, admin_user):
        response = client.post("/login", data={"username": "admin", "password": "faux"})
        assert response.status_code == 200
        assert "Identifiants invalides." in response.text
        assert client.get("/admin/formations", follow_redirects=False).status_code == 303

    def test_utilisateur_inconnu(self, client, admin_user):
        response = client.post("/login", data={"username": "personne", "password": "x"})
        assert "Identifiants invalides." in response.text

    def test_deconnexion(self, admin_client):
        response = admin_client.post("/logout", follow_redirects=False)
        assert response.status_code == 303
        assert response.headers["location"] == "/"

        response = admin_client.get("/admin/formations", follow_redirects=False)
        assert response.headers["location"] == "/login"


class TestAdminGuard:
    def test_anonyme_redirige_vers_login(self, client, catalog):
        for url in ("/admin/formations", "/admin/playlists", "/admin/categories"):
            response = client.get(url, follow_redirects=False)
            assert response.status_code == 303
            assert response.headers["location"] == "/login"

    def test_anonyme_ne_peut_pas_supprimer(self, client, catalog, categorie_repo):
        categorie = catalog["categories"]["SQL"]
        response = client.post(
            f"/admin/categorie/supprimer/{categorie.id}",
            data={"_token": "x"},
            follow_redirects=False,
        )
        assert response.headers["location"] == "/login"
        assert categorie_repo.find(categorie.id) is not None

    def test_utilisateur_sans_role_admin_revoit_le_formulaire(self, client, simple_user):
        """Connecte sans ROLE_ADMIN, /login affiche le formulaire au lieu de rediriger."""
        client.post("/login", data={"username": "lecteur", "password": "secret-user"})
        response = client.get("/login", follow_redirects=False)
        assert response.status_code == 200
        assert 'name="password"' in response.text

    def test_administrateur_connecte_redirige(self, admin_client):
        response = admin_client.get("/login", follow_redirects=False)
        assert response.status_code == 303
        assert response.headers["location"] == "/admin/formations"

    def test_utilisateur_sans_role_admin(self, client, simple_user, catalog):
        client.post("/login", data={"username": "lecteur", "password": "secret-user"})
        response = client.get("/admin/formations")
        assert response.status_code == 403
        assert "Accès refusé" in response.text
