"""Ventana principal del panel de usuarios."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QFormLayout,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QMainWindow,
    QPushButton,
    QTableWidget,
    QTableWidgetItem,
    QVBoxLayout,
    QWidget,
)

from panel_usuarios.core.dashboard import DirectoryDashboard
from panel_usuarios.models.user import UserRecord


@dataclass(slots=True)
class _TableColumns:
    id: int = 0
    name: int = 1
    username: int = 2
    email: int = 3
    company: int = 4
    editar: int = 5
    eliminar: int = 6


HEADERS = ["ID", "Nombre", "Usuario", "Email", "Empresa", "Editar", "Eliminar"]


class MainWindow(QMainWindow):
    """Formulario de alta/edición y tabla de usuarios."""

    def __init__(self, *, dashboard: DirectoryDashboard, cargar_al_iniciar: bool = True) -> None:
        super().__init__()
        self.dashboard = dashboard
        self._columns = _TableColumns()

        self.setWindowTitle("Panel de usuarios")
        self.resize(1100, 520)

        self.input_name = QLineEdit()
        self.input_username = QLineEdit()
        self.input_email = QLineEdit(placeholderText="usuario@dominio.com")
        self.input_company = QLineEdit()
        # clave del almacén local -> widget
        self._inputs = {
            "name": self.input_name,
            "username": self.input_username,
            "email": self.input_email,
            "companyName": self.input_company,
        }
        for clave, widget in self._inputs.items():
            widget.textChanged.connect(
                lambda texto, clave=clave: self.dashboard.actualizar_campo(clave, texto)
            )
            widget.returnPressed.connect(self._on_submit)

        self.submit_button = QPushButton("Guardar")
        self.submit_button.clicked.connect(self._on_submit)

        self.cancel_button = QPushButton("Cancelar")
        self.cancel_button.setObjectName("cancelButton")
        self.cancel_button.clicked.connect(self._on_cancel)

        self.error_label = QLabel("")
        self.error_label.setObjectName("errorLabel")
        self.error_label.setWordWrap(True)

        self.table = QTableWidget(columnCount=len(HEADERS))
        self.table.setHorizontalHeaderLabels(HEADERS)
        self.table.horizontalHeader().setStretchLastSection(True)
        self.table.verticalHeader().setVisible(False)
        self.table.setSelectionBehavior(QTableWidget.SelectionBehavior.SelectRows)
        self.table.setEditTriggers(QTableWidget.EditTrigger.NoEditTriggers)

        self._build_ui()
        self._apply_styles()
        self._refresh()

        if cargar_al_iniciar:
            self._reload_data()

    def _build_ui(self) -> None:
        title = QLabel("Panel de gestión de usuarios")
        title.setObjectName("titleLabel")

        form = QFormLayout()
        form.setLabelAlignment(Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter)
        form.addRow("Nombre", self.input_name)
        form.addRow("Usuario", self.input_username)
        form.addRow("E-mail", self.input_email)
        form.addRow("Empresa", self.input_company)

        buttons = QHBoxLayout()
        buttons.addWidget(self.submit_button)
        buttons.addWidget(self.cancel_button)
        buttons.addStretch(1)

        form_panel = QVBoxLayout()
        form_panel.addLayout(form)
        form_panel.addLayout(buttons)
        form_panel.addWidget(self.error_label)
        form_panel.addStretch(1)

        body = QHBoxLayout()
        body.addLayout(form_panel, 1)
        body.addWidget(self.table, 2)

        layout = QVBoxLayout()
        layout.setContentsMargins(16, 12, 16, 12)
        layout.setSpacing(12)
        layout.addWidget(title)
        layout.addLayout(body)

        container = QWidget()
        container.setLayout(layout)
        self.setCentralWidget(container)

    # ------------------------------------------------------------------
    # Eventos y acciones
    # ------------------------------------------------------------------
    def _reload_data(self) -> None:
        """Recarga los usuarios desde el servicio y refresca la tabla."""

        self.dashboard.cargar()
        self._refresh()

    def _on_submit(self) -> None:
        if self.dashboard.enviar():
            self.statusBar().showMessage("Usuario guardado", 4000)
        self._refresh()

    def _on_cancel(self) -> None:
        self.dashboard.cancelar_edicion()
        self._refresh()

    def _on_edit(self, usuario: UserRecord) -> None:
        self.dashboard.iniciar_edicion(usuario)
        self._refresh()
        self.input_name.setFocus()

    def _on_delete(self, user_id: int) -> None:
        if self.dashboard.eliminar(user_id):
            self.statusBar().showMessage(f"Usuario {user_id} eliminado", 4000)
        self._refresh()

    # ------------------------------------------------------------------
    # Renderizado
    # ------------------------------------------------------------------
    def _refresh(self) -> None:
        state = self.dashboard.state
        self._sync_inputs()
        self.submit_button.setText("Actualizar" if state.is_editing else "Guardar")
        self.cancel_button.setVisible(state.is_editing)
        self.error_label.setText(state.error_text)
        self.error_label.setVisible(bool(state.error_text))
        self._populate_table(state.usuarios)

    def _sync_inputs(self) -> None:
        valores = self.dashboard.state.formulario()
        for clave, widget in self._inputs.items():
            if widget.text() == valores[clave]:
                continue
            widget.blockSignals(True)
            widget.setText(valores[clave])
            widget.blockSignals(False)

    def _populate_table(self, usuarios: list[UserRecord]) -> None:
        self.table.clearSpans()
        self.table.setRowCount(0)

        if not usuarios:
            self.table.setRowCount(1)
            mensaje = QTableWidgetItem(self.dashboard.state.error_text)
            mensaje.setTextAlignment(Qt.AlignmentFlag.AlignCenter)
            self.table.setItem(0, 0, mensaje)
            self.table.setSpan(0, 0, 1, len(HEADERS))
            return

        self.table.setRowCount(len(usuarios))
        for row, usuario in enumerate(usuarios):
            valores = {
                self._columns.id: str(usuario.id),
                self._columns.name: usuario.name,
                self._columns.username: usuario.username,
                self._columns.email: usuario.email,
                self._columns.company: usuario.company_name,
            }
            for column, texto in valores.items():
                self.table.setItem(row, column, QTableWidgetItem(texto))

            edit_button = QPushButton("Editar")
            edit_button.setObjectName("editButton")
            edit_button.clicked.connect(lambda _=False, u=usuario: self._on_edit(u))
            self.table.setCellWidget(row, self._columns.editar, edit_button)

            delete_button = QPushButton("Eliminar")
            delete_button.setObjectName("deleteButton")
            delete_button.clicked.connect(lambda _=False, uid=usuario.id: self._on_delete(uid))
            self.table.setCellWidget(row, self._columns.eliminar, delete_button)

        self.table.resizeColumnsToContents()

    def _apply_styles(self) -> None:
        self.setStyleSheet(
            """
            #titleLabel {
                font-size: 16pt;
                font-weight: 700;
                color: #7f1d1d;
            }
            QLineEdit {
                border: 1px solid #fda4af;
                border-radius: 6px;
                padding: 6px 8px;
            }
            QLineEdit:focus {
                border: 2px solid #e11d48;
            }
            QPushButton {
                background: #e11d48;
                color: #fff;
                border: none;
                border-radius: 8px;
                padding: 6px 14px;
                font-weight: 600;
            }
            QPushButton:hover {
                background: #be123c;
            }
            #cancelButton {
                background: #64748b;
            }
            #editButton {
                background: #f59e0b;
            }
            #deleteButton {
                background: #b91c1c;
            }
            #errorLabel {
                color: #b91c1c;
                font-weight: 600;
            }
            """
        )


__all__ = ["MainWindow"]
