from api.domain.usuario.value_objects import UsuarioAtual


def test_admin_por_cabecalho():
    usuario = UsuarioAtual.de_cabecalhos("RH@mp.example", "true")
    assert usuario.email == "rh@mp.example"
    assert usuario.is_admin


def test_sem_cabecalho_de_papel_nao_e_admin():
    assert not UsuarioAtual.de_cabecalhos("rh@mp.example", None).is_admin
    assert not UsuarioAtual.de_cabecalhos("rh@mp.example", "false").is_admin


def test_email_admin_fixo_sempre_admin():
    usuario = UsuarioAtual.de_cabecalhos(" Chefe@MP.example ", None, email_admin_fixo="chefe@mp.example")
    assert usuario.is_admin


def test_anonimo():
    usuario = UsuarioAtual.de_cabecalhos(None, None, email_admin_fixo="chefe@mp.example")
    assert usuario.email == ""
    assert not usuario.is_admin
