"""
PDF Generation Service.
Creates order slips ("fiches de commande") using ReportLab.
"""

from datetime import datetime
from pathlib import Path
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet, ParagraphStyle
from reportlab.lib.units import mm
from reportlab.platypus import (
    SimpleDocTemplate,
    Paragraph,
    Spacer,
    Table,
    TableStyle,
)
from reportlab.lib.enums import TA_RIGHT

from app.core.config import settings
from app.core.formatting import (
    CURRENCY_SEPARATOR,
    GROUP_SEPARATOR,
    format_currency,
    format_date_long,
    format_date_short,
)
from app.models.client import Client
from app.models.order import Order
from app.models.workshop import Workshop
from app.services import derivations, measurements


class PDFService:
    """Service for generating order slip PDFs."""

    def __init__(self):
        self.storage_path = Path(settings.PDF_STORAGE_PATH)
        self.storage_path.mkdir(parents=True, exist_ok=True)

        # Colors
        self.primary_color = colors.HexColor("#7C3AED")  # Violet
        self.secondary_color = colors.HexColor("#5B21B6")  # Dark violet
        self.gray_color = colors.HexColor("#6B7280")
        self.light_gray = colors.HexColor("#F3F4F6")
        self.border_color = colors.HexColor("#E5E7EB")

    def _get_styles(self):
        """Get custom paragraph styles."""
        styles = getSampleStyleSheet()

        styles.add(ParagraphStyle(
            name='SlipTitle',
            parent=styles['Heading1'],
            fontSize=22,
            textColor=self.primary_color,
            spaceAfter=6*mm,
        ))
        styles.add(ParagraphStyle(
            name='SectionHeader',
            parent=styles['Heading2'],
            fontSize=12,
            textColor=self.secondary_color,
            spaceBefore=4*mm,
            spaceAfter=2*mm,
        ))
        styles.add(ParagraphStyle(
            name='NormalText',
            parent=styles['Normal'],
            fontSize=10,
            textColor=colors.black,
        ))
        styles.add(ParagraphStyle(
            name='SmallText',
            parent=styles['Normal'],
            fontSize=8,
            textColor=self.gray_color,
        ))
        styles.add(ParagraphStyle(
            name='RightAlign',
            parent=styles['Normal'],
            fontSize=10,
            alignment=TA_RIGHT,
        ))
        styles.add(ParagraphStyle(
            name='Bold',
            parent=styles['Normal'],
            fontSize=10,
            fontName='Helvetica-Bold',
        ))

        return styles

    def _money(self, amount) -> str:
        # Helvetica has no glyph for the narrow no-break space.
        return format_currency(amount).replace(GROUP_SEPARATOR, CURRENCY_SEPARATOR)

    def _grid_style(self) -> TableStyle:
        return TableStyle([
            ('BACKGROUND', (0, 0), (-1, 0), self.primary_color),
            ('TEXTCOLOR', (0, 0), (-1, 0), colors.white),
            ('FONTNAME', (0, 0), (-1, 0), 'Helvetica-Bold'),
            ('FONTSIZE', (0, 0), (-1, -1), 9),
            ('GRID', (0, 0), (-1, -1), 0.5, self.border_color),
            ('TOPPADDING', (0, 0), (-1, -1), 2*mm),
            ('BOTTOMPADDING', (0, 0), (-1, -1), 2*mm),
        ])

    async def generate_order_pdf(
        self,
        order: Order,
        client: Client | None,
        workshop: Workshop,
    ) -> str:
        """
        Generate the slip of an order.

        Args:
            order: Order with its payments loaded
            client: Registered client, or None for guest orders
            workshop: Workshop profile (header)

        Returns:
            Path to generated PDF file
        """
        styles = self._get_styles()

        filepath = self.storage_path / f"commande_{order.id}.pdf"

        doc = SimpleDocTemplate(
            str(filepath),
            pagesize=A4,
            rightMargin=20*mm,
            leftMargin=20*mm,
            topMargin=20*mm,
            bottomMargin=20*mm,
        )

        elements = []

        # ===== HEADER =====
        header_data = [
            [
                Paragraph(f"<b>{escape(workshop.name)}</b>", styles['Bold']),
                Paragraph("<b>FICHE DE COMMANDE</b>", styles['SlipTitle']),
            ],
            [
                Paragraph(escape(workshop.address or ""), styles['SmallText']),
                Paragraph(f"N° {order.id}", styles['RightAlign']),
            ],
            [
                Paragraph(f"Tél: {escape(workshop.phone or 'N/A')}", styles['SmallText']),
                Paragraph(
                    f"Livraison: {format_date_long(order.delivery_date)}",
                    styles['RightAlign'],
                ),
            ],
            [
                Paragraph(f"Email: {escape(workshop.email or 'N/A')}", styles['SmallText']),
                Paragraph(f"Statut: {escape(order.status.value)}", styles['RightAlign']),
            ],
        ]
        header_table = Table(header_data, colWidths=[95*mm, 75*mm])
        header_table.setStyle(TableStyle([
            ('VALIGN', (0, 0), (-1, -1), 'TOP'),
            ('ALIGN', (1, 0), (1, -1), 'RIGHT'),
        ]))
        elements.append(header_table)
        elements.append(Spacer(1, 8*mm))

        # ===== CLIENT =====
        elements.append(Paragraph("CLIENT", styles['SectionHeader']))
        clients = {client.id: client} if client is not None else {}
        client_info = f"<b>{escape(derivations.resolve_client_name(order, clients))}</b>"
        if client is not None:
            if client.phone:
                client_info += f"<br/>Tél: {escape(client.phone)}"
            client_info += f"<br/>Email: {escape(client.email)}"
            if client.address:
                client_info += f"<br/>{escape(client.address)}"
        elif order.guest_client_contact:
            client_info += f"<br/>Contact: {escape(order.guest_client_contact)}"
        elements.append(Paragraph(client_info, styles['NormalText']))
        elements.append(Spacer(1, 4*mm))

        # ===== ORDER =====
        elements.append(Paragraph(escape(order.title), styles['SectionHeader']))
        elements.append(Paragraph(escape(order.description or "N/A"), styles['NormalText']))
        elements.append(Spacer(1, 4*mm))

        # ===== MEASUREMENTS =====
        elements.append(Paragraph("MENSURATIONS", styles['SectionHeader']))
        entries = measurements.measurement_entries(order.measurements)
        if entries:
            rows = [["Mesure", "Valeur"]]
            rows.extend([e["label"], e["display"]] for e in entries)
            table = Table(rows, colWidths=[110*mm, 60*mm])
            table.setStyle(self._grid_style())
            elements.append(table)
        else:
            elements.append(Paragraph(
                measurements.EMPTY_MEASUREMENTS_MESSAGE, styles['SmallText'],
            ))
        elements.append(Spacer(1, 4*mm))

        # ===== PAYMENTS =====
        elements.append(Paragraph("PAIEMENTS REÇUS", styles['SectionHeader']))
        if order.payments:
            rows = [["Date", "Montant"]]
            rows.extend(
                [f"Paiement du {format_date_short(p.payment_date)}", self._money(p.amount)]
                for p in order.payments
            )
            table = Table(rows, colWidths=[110*mm, 60*mm])
            table.setStyle(self._grid_style())
            elements.append(table)
        else:
            elements.append(Paragraph("Aucun paiement enregistré", styles['SmallText']))
        elements.append(Spacer(1, 6*mm))

        # ===== TOTALS =====
        paid = derivations.amount_paid(order.payments)
        totals_data = [
            ["Prix total", self._money(order.total_price)],
            ["Total versé", self._money(paid)],
            ["Solde restant", self._money(derivations.balance(order))],
        ]
        totals_table = Table(totals_data, colWidths=[130*mm, 45*mm])
        totals_table.setStyle(TableStyle([
            ('ALIGN', (0, 0), (0, -1), 'RIGHT'),
            ('ALIGN', (1, 0), (1, -1), 'RIGHT'),
            ('FONTNAME', (0, -1), (-1, -1), 'Helvetica-Bold'),
            ('FONTSIZE', (0, 0), (-1, -1), 10),
            ('TOPPADDING', (0, 0), (-1, -1), 2*mm),
            ('BOTTOMPADDING', (0, 0), (-1, -1), 2*mm),
            ('LINEABOVE', (0, -1), (-1, -1), 1, self.primary_color),
            ('BACKGROUND', (0, -1), (-1, -1), self.light_gray),
        ]))
        elements.append(totals_table)

        # ===== FOOTER =====
        elements.append(Spacer(1, 10*mm))
        footer_text = (
            f"<i>Fiche générée le {format_date_long(datetime.now().date())} "
            f"par {escape(settings.APP_NAME)}</i>"
        )
        elements.append(Paragraph(footer_text, styles['SmallText']))

        doc.build(elements)

        return str(filepath)
