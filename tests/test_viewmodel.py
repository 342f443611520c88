import pytest

import directorio.core.viewmodel as viewmodel_mod
from directorio.config import DirectorySettings
from directorio.core.services import SortOrder
from directorio.core.state import DirectoryState, LoadStatus
from directorio.core.viewmodel import DirectoryController


def test_initial_snapshot_is_loading(controller):
    snapshot = controller.snapshot

    assert snapshot.status == LoadStatus.LOADING
    assert snapshot.is_loading
    assert snapshot.visible_items == ()
    assert not snapshot.show_pagination
    assert snapshot.current_page == 1


def test_loaded_collection_has_four_pages(loaded_controller):
    tamanos = []
    for pagina in range(1, 5):
        loaded_controller.ir_a_pagina(pagina)
        tamanos.append(loaded_controller.snapshot.visible_count)

    snapshot = loaded_controller.snapshot
    assert tamanos == [14, 14, 14, 8]
    assert snapshot.status == LoadStatus.READY
    assert snapshot.total_pages == 4
    assert snapshot.total_count == 50
    assert snapshot.show_pagination
    assert list(snapshot.page_numbers) == [1, 2, 3, 4]


def test_network_failure_sets_error_state(controller):
    token = controller.iniciar_carga()

    assert controller.fallar_carga(token, "No se pudo conectar al servicio: timed out.")

    snapshot = controller.snapshot
    assert snapshot.is_error
    assert snapshot.error_message == "No se pudo conectar al servicio: timed out."
    assert snapshot.visible_items == ()
    assert snapshot.total_pages == 0
    assert not snapshot.show_pagination
    assert not snapshot.is_empty


def test_failure_without_message_uses_generic_one(controller):
    token = controller.iniciar_carga()
    controller.fallar_carga(token, "")

    assert controller.snapshot.error_message == "No se pudieron obtener los usuarios"


def test_query_change_resets_page_to_one(loaded_controller):
    loaded_controller.ir_a_pagina(3)
    assert loaded_controller.snapshot.current_page == 3

    loaded_controller.establecer_consulta("acme")

    snapshot = loaded_controller.snapshot
    assert snapshot.current_page == 1
    assert snapshot.visible_count == 10
    assert all("acme" in user.company_name.lower() for user in snapshot.visible_items)


def test_query_change_resets_page_even_when_results_span_pages(loaded_controller):
    loaded_controller.ir_a_pagina(2)
    loaded_controller.establecer_consulta("l")

    assert loaded_controller.snapshot.total_pages > 1
    assert loaded_controller.snapshot.current_page == 1


def test_sort_change_keeps_page_number(loaded_controller):
    loaded_controller.ir_a_pagina(3)
    antes = loaded_controller.snapshot.visible_items

    loaded_controller.establecer_orden(SortOrder.DESCENDING)

    snapshot = loaded_controller.snapshot
    assert snapshot.current_page == 3
    assert snapshot.visible_items != antes


def test_empty_filter_result_is_ready_and_empty(loaded_controller):
    loaded_controller.establecer_consulta("no-existe-nadie")

    snapshot = loaded_controller.snapshot
    assert snapshot.status == LoadStatus.READY
    assert snapshot.is_empty
    assert snapshot.visible_count == 0
    assert snapshot.total_pages == 0
    assert not snapshot.show_pagination
    assert snapshot.current_page == 1


def test_page_requests_are_clamped(loaded_controller):
    loaded_controller.ir_a_pagina(99)
    assert loaded_controller.state.pagina == 4

    loaded_controller.ir_a_pagina(0)
    assert loaded_controller.state.pagina == 1


def test_previous_and_next_navigation(loaded_controller):
    loaded_controller.pagina_anterior()
    assert loaded_controller.snapshot.current_page == 1
    assert not loaded_controller.snapshot.has_previous

    for _ in range(5):
        loaded_controller.pagina_siguiente()

    snapshot = loaded_controller.snapshot
    assert snapshot.current_page == 4
    assert snapshot.has_previous
    assert not snapshot.has_next


def test_selection_toggles_and_survives_filtering(loaded_controller):
    loaded_controller.alternar_seleccion(7)
    loaded_controller.establecer_consulta("leanne")

    snapshot = loaded_controller.snapshot
    assert snapshot.selected_id == 7
    assert not any(snapshot.is_selected(user.id) for user in snapshot.visible_items)

    loaded_controller.alternar_seleccion(7)
    assert loaded_controller.snapshot.selected_id is None


def test_selecting_another_item_replaces_selection(loaded_controller):
    loaded_controller.alternar_seleccion(1)
    loaded_controller.alternar_seleccion(2)

    assert loaded_controller.snapshot.selected_id == 2


def test_second_load_while_in_flight_is_refused(controller):
    token = controller.iniciar_carga()

    assert token is not None
    assert controller.carga_en_curso
    assert controller.iniciar_carga() is None


def test_cancelled_load_result_is_discarded(controller, coleccion):
    token = controller.iniciar_carga()
    controller.cancelar_carga()

    assert token.cancelled
    assert not controller.completar_carga(token, coleccion)
    assert not controller.fallar_carga(token, "tarde")
    assert controller.snapshot.status == LoadStatus.LOADING
    assert not controller.carga_en_curso


def test_stale_token_from_previous_load_is_discarded(controller, coleccion):
    viejo = controller.iniciar_carga()
    controller.cancelar_carga()
    nuevo = controller.iniciar_carga()

    assert not controller.completar_carga(viejo, coleccion)
    assert controller.completar_carga(nuevo, coleccion)
    assert controller.snapshot.total_count == 50


def test_reload_resets_ui_state(loaded_controller, coleccion):
    loaded_controller.establecer_consulta("a")
    loaded_controller.establecer_orden(SortOrder.DESCENDING)
    loaded_controller.ir_a_pagina(2)
    loaded_controller.alternar_seleccion(3)

    token = loaded_controller.iniciar_carga()

    assert loaded_controller.state == DirectoryState()
    loaded_controller.completar_carga(token, coleccion)
    assert loaded_controller.state.consulta == ""
    assert loaded_controller.state.orden == SortOrder.ASCENDING
    assert loaded_controller.state.seleccionado is None


def test_listeners_receive_each_snapshot_until_unsubscribed(loaded_controller):
    recibidos = []
    baja = loaded_controller.suscribir(recibidos.append)

    loaded_controller.establecer_consulta("acme")
    loaded_controller.alternar_seleccion(2)
    baja()
    loaded_controller.alternar_seleccion(2)

    assert len(recibidos) == 2
    assert recibidos[-1] is not recibidos[0]
    assert recibidos[-1].selected_id == 2
    assert recibidos[0].selected_id is None


def test_state_is_replaced_not_mutated(loaded_controller):
    anterior = loaded_controller.state

    loaded_controller.establecer_consulta("acme")

    assert loaded_controller.state is not anterior
    assert anterior.consulta == ""


def test_filter_stage_is_memoized(monkeypatch, loaded_controller):
    llamadas = []
    original = viewmodel_mod.filtrar_y_ordenar

    def _contador(*args, **kwargs):
        llamadas.append(args)
        return original(*args, **kwargs)

    monkeypatch.setattr(viewmodel_mod, "filtrar_y_ordenar", _contador)

    loaded_controller.alternar_seleccion(1)
    loaded_controller.ir_a_pagina(2)
    assert llamadas == []

    loaded_controller.establecer_consulta("acme")
    loaded_controller.alternar_seleccion(2)
    assert len(llamadas) == 1

    loaded_controller.establecer_orden(SortOrder.DESCENDING)
    assert len(llamadas) == 2


def test_custom_page_size_from_settings(coleccion):
    controller = DirectoryController(DirectorySettings(page_size=20))
    token = controller.iniciar_carga()
    controller.completar_carga(token, coleccion)

    assert controller.snapshot.total_pages == 3
    assert controller.snapshot.visible_count == 20


@pytest.mark.parametrize("orden", [SortOrder.ASCENDING, SortOrder.DESCENDING])
def test_visible_items_follow_sort_order(loaded_controller, orden):
    loaded_controller.establecer_orden(orden)
    nombres = [user.name.lower() for user in loaded_controller.snapshot.visible_items]

    assert nombres == sorted(nombres, reverse=orden == SortOrder.DESCENDING)
